import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from clippub.errors import ClipboardUnavailable, SizeLimitExceeded
from clippub.models.content import (
    ClipboardContent,
    ClipboardFileContent,
    ClipboardFileReference,
    ClipboardText,
)

logger = logging.getLogger(__name__)

MAX_INLINE_FILE_SIZE = 20 * 1024 * 1024


class ClipboardBackend(ABC):

    def read(self) -> Optional[ClipboardContent]:
        content = self._read()
        if content is None:
            logger.info("Clipboard is empty")
        else:
            logger.info(f"Clipboard content: {type(content).__name__}")
        return content

    def copy_text(self, text: str) -> bool:
        try:
            self._copy_text(text)
            return True
        except Exception as e:
            logger.warning(f"Could not copy to clipboard: {e}")
            return False

    @abstractmethod
    def _read(self) -> Optional[ClipboardContent]:
        pass

    @abstractmethod
    def _copy_text(self, text: str) -> None:
        pass

    def _run_command(self, command: Sequence[str]) -> bytes:
        try:
            result = subprocess.run(
                list(command),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
            )
        except FileNotFoundError as e:
            raise ClipboardUnavailable(f"{command[0]} is not installed", cause=e)
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="ignore").strip()
            raise ClipboardUnavailable(
                f"Command failed: {' '.join(command)}\n{stderr}".rstrip(), cause=e)
        return result.stdout

    def _pipe_to_command(self, command: Sequence[str], text: str) -> None:
        # xclip keeps a child alive to serve the selection, so output is not captured
        subprocess.run(
            list(command),
            input=text.encode("utf-8"),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )

    @staticmethod
    def _decode_text(data: bytes) -> str:
        return data.decode("utf-8", errors="replace")

    @staticmethod
    def _build_text_item(text: Optional[str]) -> Optional[ClipboardText]:
        if not text:
            return None
        return ClipboardText(text)

    def _resolve_file_paths(self, paths: List[str]) -> Optional[ClipboardContent]:
        """
        Turn the file entries found on the clipboard into a file variant.

        Returns None when the caller should fall back to text: no entry,
        several entries, or a single entry that is not a readable regular
        file. Raises SizeLimitExceeded when the single file is too large.
        """
        if not paths:
            return None
        if len(paths) > 1:
            logger.info(f"{len(paths)} files on clipboard, treating as text")
            return None

        path = Path(paths[0])
        try:
            if not path.is_file():
                logger.info(f"{path} is not a regular file, treating as text")
                return None
            file_size = path.stat().st_size
        except OSError as e:
            logger.info(f"Could not stat {path}, treating as text: {e}")
            return None

        if file_size > MAX_INLINE_FILE_SIZE:
            raise SizeLimitExceeded(str(path), file_size, MAX_INLINE_FILE_SIZE)

        try:
            payload = path.read_bytes()
        except OSError as e:
            logger.warning(f"Failed to read {path}, keeping a reference: {e}")
            return ClipboardFileReference(str(path))
        return ClipboardFileContent(str(path), payload)
