from clippub.models.config import Config
from clippub.models.content import (
    ClipboardContent,
    ClipboardFileContent,
    ClipboardFileReference,
    ClipboardImage,
    ClipboardText,
)

__all__ = [
    'ClipboardContent',
    'ClipboardFileContent',
    'ClipboardFileReference',
    'ClipboardImage',
    'ClipboardText',
    'Config',
]
