"""
Guess the format of untyped clipboard text.

The rules below are evaluated in order and the first match wins. The order
is part of the contract: an earlier rule shadows every later one, so e.g.
a JSON array of comma-separated strings is reported as JSON, not CSV.
"""

import json
import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

VIDEO_EXTENSIONS = ("mp4", "mov", "avi", "mkv", "webm")

# Patterns used with search() must not rescan the rest of the text from
# every start position; clipboard pastes can be megabytes long.
_VIDEO_SUFFIX = re.compile(
    r"[^/\\]\.(" + "|".join(VIDEO_EXTENSIONS) + r")$", re.IGNORECASE)
_HTML_DOCUMENT = re.compile(
    r"^\s*<([a-z][\w:-]*)(?=[\s/>])[^>]*>.*</\1\s*>\s*$", re.IGNORECASE | re.DOTALL)
_HTML_OPEN = re.compile(r"<html\b[^<>]*>", re.IGNORECASE)
_HTML_CLOSE = re.compile(r"</html\s*>", re.IGNORECASE)
_XML_ELEMENT = re.compile(r"<[A-Za-z_][\w.:-]*(\s[^<>]*)?/?>")
_MD_HEADING = re.compile(r"^#{1,6}[ \t]+\S", re.MULTILINE)
_MD_LINK = re.compile(r"\[[^\[\]\n]+\]\([^()\s]+\)")
_MD_LIST = re.compile(r"^[ \t]*[-*+][ \t]+\S", re.MULTILINE)
_CSV_LINE = re.compile(r"^[^,]+(,[^,]+)+$")
_JS_DECLARATION = re.compile(
    r"^\s*(function|const|let|var|class|import|export)\b")
# group 1 is the selector text since the previous brace
_CSS_RULE = re.compile(r"(?:^|(?<=[{}]))([^{}]*)\{[^{}:]*:[^{}]*\}")
_CSS_AT_RULE = re.compile(
    r"^[ \t]*@(media|keyframes|import|font-face)\b", re.MULTILINE)


@dataclass(frozen=True)
class FormatGuess:
    format: str
    extension: str
    confidence: float

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(
                f"confidence must be within [0, 1], got {self.confidence}")


@dataclass(frozen=True)
class SniffRule:
    format: str
    extension: str
    confidence: float
    predicate: Callable[[str], bool]
    extension_from: Optional[Callable[[str], str]] = None

    def guess(self, content: str) -> FormatGuess:
        extension = self.extension
        if self.extension_from is not None:
            extension = self.extension_from(content)
        return FormatGuess(self.format, extension, self.confidence)


def _match_video_suffix(content: str):
    tokens = content.rstrip().rsplit(None, 1)
    if not tokens:
        return None
    return _VIDEO_SUFFIX.search(tokens[-1])


def _is_video_filename(content: str) -> bool:
    return _match_video_suffix(content) is not None


def _video_extension(content: str) -> str:
    return _match_video_suffix(content).group(1)


def _is_json(content: str) -> bool:
    try:
        parsed = json.loads(content)
    except (ValueError, RecursionError):
        return False
    return isinstance(parsed, (dict, list))


def _is_html(content: str) -> bool:
    if _HTML_DOCUMENT.match(content):
        return True
    opening = _HTML_OPEN.search(content)
    return opening is not None and _HTML_CLOSE.search(content, opening.end()) is not None


def _is_xml(content: str) -> bool:
    return content.lstrip().startswith("<?xml") and _XML_ELEMENT.search(content) is not None


def _is_markdown(content: str) -> bool:
    return bool(
        _MD_HEADING.search(content)
        or _MD_LINK.search(content)
        or _MD_LIST.search(content)
    )


def _is_csv(content: str) -> bool:
    lines = content.splitlines()
    if len(lines) < 2:
        return False
    return any(_CSV_LINE.match(line) for line in lines)


def _is_javascript(content: str) -> bool:
    return bool(_JS_DECLARATION.match(content)) or "=>" in content


def _is_css(content: str) -> bool:
    if any(match.group(1).strip() for match in _CSS_RULE.finditer(content)):
        return True
    return _CSS_AT_RULE.search(content) is not None


RULES: Tuple[SniffRule, ...] = (
    SniffRule("video", "", 0.9, _is_video_filename, _video_extension),
    SniffRule("json", "json", 1.0, _is_json),
    SniffRule("html", "html", 0.9, _is_html),
    SniffRule("xml", "xml", 0.9, _is_xml),
    SniffRule("markdown", "md", 0.8, _is_markdown),
    SniffRule("csv", "csv", 0.7, _is_csv),
    SniffRule("javascript", "js", 0.7, _is_javascript),
    SniffRule("css", "css", 0.8, _is_css),
)

PLAIN_TEXT = FormatGuess("plain", "txt", 1.0)

FORMATS = frozenset(rule.format for rule in RULES) | {PLAIN_TEXT.format}


def detect(content: str) -> FormatGuess:
    for rule in RULES:
        if rule.predicate(content):
            return rule.guess(content)
    return PLAIN_TEXT
