from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class ClipboardText:
    content: str


@dataclass(frozen=True)
class ClipboardFileReference:
    """A file on disk whose bytes were not read while inspecting the clipboard."""
    path: str


@dataclass(frozen=True)
class ClipboardFileContent:
    path: str
    content: bytes


@dataclass(frozen=True)
class ClipboardImage:
    content: bytes
    format: Literal["png", "jpg"]


ClipboardContent = Union[
    ClipboardText,
    ClipboardFileReference,
    ClipboardFileContent,
    ClipboardImage,
]
