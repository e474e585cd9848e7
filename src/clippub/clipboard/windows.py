import io
import logging
import time
from typing import Optional

from PIL import Image, ImageGrab

try:
    import win32clipboard as wc
    HAS_WIN32 = True
except ImportError:
    HAS_WIN32 = False

from clippub.clipboard.base import ClipboardBackend
from clippub.models.content import ClipboardContent, ClipboardImage

logger = logging.getLogger(__name__)


class WindowsClipboard(ClipboardBackend):

    def _read(self) -> Optional[ClipboardContent]:
        try:
            clipboard_data = ImageGrab.grabclipboard()
        except Exception as e:
            logger.info(f"ImageGrab could not read the clipboard: {e}")
            clipboard_data = None

        if isinstance(clipboard_data, Image.Image):
            image = self._build_image_item(clipboard_data)
            if image is not None:
                return image
        elif isinstance(clipboard_data, (list, tuple)):
            file_item = self._resolve_file_paths([str(p) for p in clipboard_data])
            if file_item is not None:
                return file_item

        return self._build_text_item(self._get_text())

    def _build_image_item(self, image: Image.Image) -> Optional[ClipboardImage]:
        output = io.BytesIO()
        try:
            image.save(output, format="PNG")
        except (OSError, ValueError) as e:
            logger.warning(f"Could not serialize clipboard image: {e}")
            return None
        return ClipboardImage(output.getvalue(), "png")

    def _get_text(self) -> str:
        if HAS_WIN32:
            text = self._get_text_win32()
            if text is not None:
                return text
        output = self._decode_text(
            self._run_command(["powershell", "-command", "Get-Clipboard"]))
        return output.rstrip("\r\n")

    def _open_clipboard(self) -> bool:
        for _ in range(3):
            try:
                wc.OpenClipboard()
                return True
            except Exception:
                time.sleep(0.05)
        return False

    def _get_text_win32(self) -> Optional[str]:
        if not self._open_clipboard():
            logger.info("Could not open the clipboard, falling back to Get-Clipboard")
            return None
        try:
            if not wc.IsClipboardFormatAvailable(wc.CF_UNICODETEXT):
                return ""
            return wc.GetClipboardData(wc.CF_UNICODETEXT)
        except Exception as e:
            logger.info(f"Could not read CF_UNICODETEXT, falling back to Get-Clipboard: {e}")
            return None
        finally:
            wc.CloseClipboard()

    def _copy_text(self, text: str) -> None:
        if HAS_WIN32 and self._open_clipboard():
            try:
                wc.EmptyClipboard()
                wc.SetClipboardData(wc.CF_UNICODETEXT, text)
                return
            except Exception as e:
                logger.info(f"SetClipboardData failed, falling back to clip: {e}")
            finally:
                wc.CloseClipboard()
        self._pipe_to_command(["clip"], text)
