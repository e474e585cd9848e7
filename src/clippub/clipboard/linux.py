import logging
import subprocess
from typing import List, Optional, Tuple

from clippub.clipboard.base import ClipboardBackend
from clippub.errors import ClipboardUnavailable
from clippub.models.content import ClipboardContent, ClipboardImage

logger = logging.getLogger(__name__)


class LinuxClipboard(ClipboardBackend):
    _IMAGE_TARGETS: Tuple[Tuple[str, str], ...] = (
        ("image/png", "png"),
        ("image/jpeg", "jpg"),
    )
    _TEXT_COMMANDS: Tuple[List[str], ...] = (
        ["xclip", "-selection", "clipboard", "-o"],
        ["xsel", "--clipboard", "--output"],
    )
    _COPY_COMMANDS: Tuple[List[str], ...] = (
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    )

    def _read(self) -> Optional[ClipboardContent]:
        image = self._get_image()
        if image is not None:
            return image
        return self._build_text_item(self._get_text())

    def _get_image(self) -> Optional[ClipboardImage]:
        for target, image_format in self._IMAGE_TARGETS:
            try:
                payload = self._run_command(
                    ["xclip", "-selection", "clipboard", "-t", target, "-o"])
            except ClipboardUnavailable as e:
                logger.info(f"No {target} data on clipboard: {e}")
                continue
            if payload:
                return ClipboardImage(payload, image_format)
        return None

    def _get_text(self) -> str:
        for command in self._TEXT_COMMANDS:
            try:
                return self._decode_text(self._run_command(command))
            except ClipboardUnavailable as e:
                logger.warning(f"{command[0]} could not read the clipboard: {e}")

        raise ClipboardUnavailable(
            "Failed to read from clipboard using xclip and xsel. "
            "Please ensure one of them is installed and configured.")

    def _copy_text(self, text: str) -> None:
        last_error: Optional[Exception] = None
        for command in self._COPY_COMMANDS:
            try:
                self._pipe_to_command(command, text)
                return
            except (FileNotFoundError, subprocess.CalledProcessError) as e:
                logger.info(f"{command[0]} could not write the clipboard: {e}")
                last_error = e
        raise ClipboardUnavailable("Neither xclip nor xsel could write the clipboard", cause=last_error)
