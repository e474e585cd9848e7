from clippub.utils.format_sniffer import FormatGuess, detect
from clippub.utils.image import to_jpeg
from clippub.utils.keys import generate_object_key
from clippub.utils.mime import get_extension, get_mime_type

__all__ = [
    'FormatGuess',
    'detect',
    'generate_object_key',
    'get_extension',
    'get_mime_type',
    'to_jpeg',
]
