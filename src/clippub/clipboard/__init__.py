"""
Cross-platform clipboard access.

Each supported operating system has its own ClipboardBackend; use the
factory to get the one for the running platform.
"""

from clippub.clipboard.base import MAX_INLINE_FILE_SIZE, ClipboardBackend
from clippub.clipboard.factory import get_clipboard_backend, get_clipboard_class

__all__ = [
    'MAX_INLINE_FILE_SIZE',
    'ClipboardBackend',
    'get_clipboard_backend',
    'get_clipboard_class',
]
