from pathlib import PurePath

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    # text
    "txt": "text/plain",
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "json": "application/json",
    "xml": "application/xml",
    "md": "text/markdown",
    "csv": "text/csv",
    # images
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    # video
    "mp4": "video/mp4",
    "mov": "video/quicktime",
    "avi": "video/x-msvideo",
    "mkv": "video/x-matroska",
    "webm": "video/webm",
    # applications
    "pdf": "application/pdf",
    "zip": "application/zip",
}


def get_extension(path: str) -> str:
    """Extension of the last path component, without the dot ("" if none)."""
    return PurePath(path).suffix.lstrip(".")


def get_mime_type(name: str) -> str:
    return MIME_TYPES.get(get_extension(name).lower(), DEFAULT_MIME_TYPE)
