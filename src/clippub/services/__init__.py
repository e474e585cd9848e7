from clippub.services.publish_service import PublishService, PreparedUpload
from clippub.services.upload_service import UploadService

__all__ = ['PreparedUpload', 'PublishService', 'UploadService']
