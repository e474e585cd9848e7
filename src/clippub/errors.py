"""
Error hierarchy for clippub.

Every error raised on purpose derives from ClipPubError so the CLI can
report it and exit with status 1. Recoverable conditions (fallback
utilities, degraded clipboard variants) never surface as exceptions.
"""

from typing import Optional


class ClipPubError(Exception):

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause


class ClipboardError(ClipPubError):
    pass


class ClipboardUnavailable(ClipboardError):
    pass


class UnsupportedPlatform(ClipboardError):
    pass


class SizeLimitExceeded(ClipboardError):

    def __init__(self, path: str, size: int, limit: int):
        super().__init__(
            f"File {path} is {size} bytes, which exceeds the {limit // (1024 * 1024)}MB limit")
        self.path = path
        self.size = size
        self.limit = limit


class NoContent(ClipPubError):
    pass


class FileReadError(ClipPubError):
    pass


class ImageError(ClipPubError):
    pass


class ImageDecodeError(ImageError):
    pass


class ImageEncodeError(ImageError):
    pass


class ConfigError(ClipPubError):
    pass


class ConfigMissing(ConfigError):
    pass


class UploadError(ClipPubError):
    pass
