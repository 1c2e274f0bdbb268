"""Line-oriented ``KEY=VALUE`` documents and their on-disk store.

The upsert keeps every line it does not own byte-for-byte: comments, blank
lines and malformed entries survive untouched and in their original order.
Only the text before the first ``=`` is a line's key, so values may contain
``=`` freely. A line without ``=`` has the whole line as its key.

Appended keys always go after the last segment. A document ending in a newline
has an empty last segment, so it gains a blank line before the new entries.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

LINE_SEPARATOR = "\n"
KEY_SEPARATOR = "="

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines, keeping a trailing empty segment."""

    return text.split(LINE_SEPARATOR)


def join_lines(lines: List[str]) -> str:
    return LINE_SEPARATOR.join(lines)


def line_key(line: str) -> str:
    """Return the portion of ``line`` before its first ``=``."""

    key, _, _ = line.partition(KEY_SEPARATOR)
    return key


def is_valid_request(updates: Any) -> bool:
    """Return whether ``updates`` is a non-empty ``str`` to ``str`` mapping."""

    if not isinstance(updates, Mapping) or not updates:
        return False
    for key, value in updates.items():
        if not isinstance(key, str) or not key:
            return False
        if not isinstance(value, str):
            return False
    return True


def _upsert_lines(lines: List[str], updates: Mapping[str, str]) -> None:
    positions: Dict[str, List[int]] = {}
    for index, line in enumerate(lines):
        positions.setdefault(line_key(line), []).append(index)

    appended: List[str] = []
    for key, value in updates.items():
        entry = f"{key}{KEY_SEPARATOR}{value}"
        matches = positions.get(key)
        if matches:
            # Pre-existing duplicates are all rewritten, never collapsed.
            for index in matches:
                lines[index] = entry
        else:
            appended.append(entry)
    lines.extend(appended)


def upsert(document_text: str, updates: Mapping[str, str]) -> Tuple[str, bool]:
    """Merge ``updates`` into ``document_text``.

    Every line whose key matches an update is replaced with ``key=value``;
    keys that match no line are appended in the order the caller supplied
    them. Returns the new text and ``True``, or the untouched text and
    ``False`` when ``updates`` is empty or not a proper mapping.
    """

    if not is_valid_request(updates):
        return document_text, False

    lines = split_lines(document_text)
    _upsert_lines(lines, updates)
    return join_lines(lines), True


@dataclass
class EnvDocument:
    """An ordered sequence of env lines."""

    lines: List[str] = field(default_factory=lambda: [""])

    @classmethod
    def parse(cls, text: str) -> "EnvDocument":
        return cls(lines=split_lines(text))

    def render(self) -> str:
        return join_lines(self.lines)

    def get(self, key: str) -> Optional[str]:
        """Return the value of the first line keyed ``key``."""

        for line in self.lines:
            if KEY_SEPARATOR in line and line_key(line) == key:
                return line.partition(KEY_SEPARATOR)[2]
        return None

    def apply(self, updates: Mapping[str, str]) -> bool:
        """Upsert ``updates`` in place. Returns ``False`` on invalid input."""

        if not is_valid_request(updates):
            return False
        _upsert_lines(self.lines, updates)
        return True


class EnvFile:
    """A ``.env`` style file on disk.

    Each :meth:`update` loads the file fresh, merges the updates in memory and
    rewrites the whole file. Text is read and written without newline
    translation so untouched lines keep their exact bytes.
    """

    def __init__(self, path: Path | str, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"EnvFile({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.is_file()

    def read_text(self) -> str:
        with self.path.open("r", encoding=self.encoding, newline="") as handle:
            return handle.read()

    def write_text(self, text: str) -> None:
        with self.path.open("w", encoding=self.encoding, newline="") as handle:
            handle.write(text)

    def load(self) -> EnvDocument:
        return EnvDocument.parse(self.read_text())

    def save(self, document: EnvDocument) -> None:
        self.write_text(document.render())

    def get(self, key: str) -> Optional[str]:
        if not self.exists():
            return None
        return self.load().get(key)

    def update(self, updates: Mapping[str, str]) -> bool:
        """Upsert ``updates`` into the file.

        Returns ``False`` without touching the file when it does not exist or
        the updates are not a non-empty mapping.
        """

        if not is_valid_request(updates):
            logger.warning("Rejected env update for %s: invalid updates", self.path)
            return False
        if not self.exists():
            logger.warning("Rejected env update: %s does not exist", self.path)
            return False

        document = self.load()
        document.apply(updates)
        self.save(document)
        logger.info("Updated %s (%s)", self.path, ", ".join(updates))
        return True


__all__ = [
    "EnvDocument",
    "EnvFile",
    "is_valid_request",
    "join_lines",
    "line_key",
    "split_lines",
    "upsert",
]
