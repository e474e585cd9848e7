import logging
import re
import tempfile
from pathlib import Path
from typing import List, Optional

import ulid

try:
    from AppKit import NSPasteboard
    from Foundation import NSURL
    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False

from clippub.clipboard.base import ClipboardBackend
from clippub.errors import ClipboardUnavailable
from clippub.models.content import ClipboardContent, ClipboardImage

logger = logging.getLogger(__name__)

# Writes the pasteboard image (PNG first, then JPEG) to the path given for
# that format and prints the path it used, or nothing if there is no image.
_IMAGE_SCRIPT = """
on run argv
  set pngPath to item 1 of argv
  set jpgPath to item 2 of argv
  try
    set imageData to (the clipboard as «class PNGf»)
    set targetPath to pngPath
  on error
    try
      set imageData to (the clipboard as «class JPEG»)
      set targetPath to jpgPath
    on error
      return ""
    end try
  end try
  set fileRef to open for access (POSIX file targetPath) with write permission
  try
    set eof fileRef to 0
    write imageData to fileRef
  on error errMsg
    close access fileRef
    error errMsg
  end try
  close access fileRef
  return targetPath
end run
"""

_BARE_FILENAME = re.compile(r"^[^/\\]+\.\w+$")


class MacOSClipboard(ClipboardBackend):

    def _read(self) -> Optional[ClipboardContent]:
        image = self._get_image()
        if image is not None:
            return image

        text = self._decode_text(self._run_command(["pbpaste"]))
        candidate = text.strip()
        if candidate and "\n" not in candidate and _BARE_FILENAME.match(candidate):
            logger.info("Clipboard text looks like a file name, looking for file URLs")
            file_item = self._resolve_file_paths(self._get_file_paths())
            if file_item is not None:
                return file_item

        return self._build_text_item(text)

    def _get_image(self) -> Optional[ClipboardImage]:
        stem = f"clippub_{ulid.new()}"
        temp_dir = Path(tempfile.gettempdir())
        targets = {
            "png": temp_dir / f"{stem}.png",
            "jpg": temp_dir / f"{stem}.jpg",
        }

        try:
            try:
                output = self._run_command(
                    ["osascript", "-e", _IMAGE_SCRIPT,
                     str(targets["png"]), str(targets["jpg"])])
            except ClipboardUnavailable as e:
                logger.info(f"Could not check pasteboard for images: {e}")
                return None

            written = self._decode_text(output).strip()
            for image_format, path in targets.items():
                if written != str(path):
                    continue
                try:
                    payload = path.read_bytes()
                except OSError as e:
                    logger.warning(f"Could not read extracted image {path}: {e}")
                    return None
                if payload:
                    return ClipboardImage(payload, image_format)
            return None
        finally:
            for path in targets.values():
                self._remove_temp_file(path)

    def _get_file_paths(self) -> List[str]:
        if not HAS_APPKIT:
            return []

        try:
            pasteboard = NSPasteboard.generalPasteboard()
            urls = pasteboard.readObjectsForClasses_options_([NSURL], None)
        except Exception as e:
            logger.info(f"Could not read file URLs from pasteboard: {e}")
            return []

        return [str(url.path()) for url in urls or [] if url.isFileURL()]

    @staticmethod
    def _remove_temp_file(path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to clean up temp file {path}: {e}")

    def _copy_text(self, text: str) -> None:
        self._pipe_to_command(["pbcopy"], text)
