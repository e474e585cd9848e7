"""
Platform-specific clipboard factory.

Picks the ClipboardBackend implementation for the running operating system.
"""

import platform
from typing import Type

from clippub.clipboard.base import ClipboardBackend
from clippub.errors import UnsupportedPlatform


def get_clipboard_class() -> Type[ClipboardBackend]:
    """
    Get the ClipboardBackend implementation for the current platform.

    Raises:
        UnsupportedPlatform: If the current platform has no backend
    """
    system = platform.system()

    if system == "Windows":
        from clippub.clipboard.windows import WindowsClipboard
        return WindowsClipboard
    elif system == "Linux":
        from clippub.clipboard.linux import LinuxClipboard
        return LinuxClipboard
    elif system == "Darwin":
        from clippub.clipboard.macos import MacOSClipboard
        return MacOSClipboard
    else:
        raise UnsupportedPlatform(f"Unsupported OS: {system} for clipboard access.")


def get_clipboard_backend() -> ClipboardBackend:
    clipboard_class = get_clipboard_class()
    return clipboard_class()
