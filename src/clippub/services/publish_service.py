import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from clippub.clipboard import MAX_INLINE_FILE_SIZE, ClipboardBackend, get_clipboard_backend
from clippub.errors import FileReadError, NoContent, SizeLimitExceeded
from clippub.models.content import (
    ClipboardContent,
    ClipboardFileContent,
    ClipboardFileReference,
    ClipboardImage,
    ClipboardText,
)
from clippub.services.upload_service import UploadService
from clippub.utils.format_sniffer import detect
from clippub.utils.image import to_jpeg
from clippub.utils.keys import generate_object_key
from clippub.utils.mime import get_extension, get_mime_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedUpload:
    key: str
    body: bytes
    content_type: str


class PublishService:

    def __init__(
        self,
        uploader: UploadService,
        backend: Optional[ClipboardBackend] = None,
    ):
        self.uploader = uploader
        self.backend = backend or get_clipboard_backend()

    def publish(self, custom_name: Optional[str] = None) -> str:
        """Read the clipboard, upload what it holds and return the public URL."""
        content = self.backend.read()
        if content is None or (isinstance(content, ClipboardText) and not content.content):
            raise NoContent("No content found in clipboard")

        prepared = self.prepare(content, custom_name)
        logger.info(
            f"Uploading {prepared.key} ({prepared.content_type}, {len(prepared.body)} bytes)")
        return self.uploader.upload(prepared.key, prepared.body, prepared.content_type)

    def prepare(self, content: ClipboardContent, custom_name: Optional[str] = None) -> PreparedUpload:
        if isinstance(content, ClipboardImage):
            return self._prepare_image(content, custom_name)
        if isinstance(content, (ClipboardFileContent, ClipboardFileReference)):
            return self._prepare_file(content, custom_name)
        if isinstance(content, ClipboardText):
            return self._prepare_text(content, custom_name)
        raise TypeError(f"Unsupported clipboard content: {type(content).__name__}")

    def _prepare_image(self, content: ClipboardImage, custom_name: Optional[str]) -> PreparedUpload:
        # recorded format is not trusted, everything goes through the normalizer
        body = to_jpeg(content.content)
        key = custom_name or generate_object_key("jpg")
        return PreparedUpload(key, body, "image/jpeg")

    def _prepare_file(
        self,
        content: Union[ClipboardFileContent, ClipboardFileReference],
        custom_name: Optional[str],
    ) -> PreparedUpload:
        path = content.path
        logger.info(f"Clipboard contains file: {path}")

        if isinstance(content, ClipboardFileContent):
            body = content.content
        else:
            body = self._read_file(path)

        if len(body) > MAX_INLINE_FILE_SIZE:
            raise SizeLimitExceeded(path, len(body), MAX_INLINE_FILE_SIZE)

        key = custom_name or generate_object_key(get_extension(path))
        return PreparedUpload(key, body, get_mime_type(path))

    @staticmethod
    def _read_file(path: str) -> bytes:
        file_path = Path(path)
        try:
            file_size = file_path.stat().st_size
            if file_size > MAX_INLINE_FILE_SIZE:
                raise SizeLimitExceeded(path, file_size, MAX_INLINE_FILE_SIZE)
            return file_path.read_bytes()
        except OSError as e:
            raise FileReadError(f"Error reading file {path}: {e}", cause=e)

    def _prepare_text(self, content: ClipboardText, custom_name: Optional[str]) -> PreparedUpload:
        guess = detect(content.content)
        logger.info(
            f"Detected format: {guess.format} (confidence: {guess.confidence * 100:.0f}%)")
        key = custom_name or generate_object_key(guess.extension)
        return PreparedUpload(key, content.content.encode("utf-8"), get_mime_type(key))
