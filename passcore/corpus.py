"""
Weak-password corpus: immutable index of normalized entries.

- One CorpusEntry per corpus line, in file order (duplicates and empty lines kept).
- Length buckets hold entry positions so candidate selection only touches
  entries of nearby length, while still yielding them in corpus order.
- default_index() builds the process-wide index at most once.
"""

import heapq
import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from . import config

logger = logging.getLogger(__name__)


class CorpusError(RuntimeError):
    """Corpus resource missing or unreadable. Deployment defect, not recoverable per call."""


def split_lines(text: str) -> List[str]:
    """One item per \\n or \\r\\n terminated line; \\x0c, \\x85, U+2028 etc. stay inside the line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(frozen=True)
class CorpusEntry:
    """One normalized known-weak password."""

    normalized: str
    length: int
    first: Optional[str]
    last: Optional[str]

    @classmethod
    def from_line(cls, line: str) -> "CorpusEntry":
        normalized = line.strip().lower()
        if not normalized:
            return cls(normalized, 0, None, None)
        return cls(normalized, len(normalized), normalized[0], normalized[-1])


class CorpusIndex:
    """Read-only ordered sequence of CorpusEntry."""

    def __init__(self, entries: Iterable[CorpusEntry], source: str = "<memory>") -> None:
        self._entries: Tuple[CorpusEntry, ...] = tuple(entries)
        self._source = source
        self._exact: FrozenSet[str] = frozenset(e.normalized for e in self._entries)
        buckets: Dict[int, List[int]] = {}
        for pos, entry in enumerate(self._entries):
            buckets.setdefault(entry.length, []).append(pos)
        self._buckets: Dict[int, Tuple[int, ...]] = {k: tuple(v) for k, v in buckets.items()}

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "<memory>") -> "CorpusIndex":
        return cls((CorpusEntry.from_line(line) for line in lines), source=source)

    @classmethod
    def from_path(cls, path: Path) -> "CorpusIndex":
        """Load a UTF-8 wordlist, one password per line."""
        path = Path(path)
        t0 = time.perf_counter()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusError(f"Could not load password corpus from {path}: {e}") from e
        index = cls.from_lines(split_lines(text), source=str(path))
        logger.info(
            "loaded password corpus %s: %d entries in %.3fs",
            path, len(index), time.perf_counter() - t0,
        )
        return index

    @classmethod
    def bundled(cls) -> "CorpusIndex":
        """Wordlist shipped inside the package."""
        return cls.from_path(config.BUNDLED_CORPUS)

    @property
    def source(self) -> str:
        return self._source

    @property
    def entries(self) -> Tuple[CorpusEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CorpusEntry]:
        return iter(self._entries)

    def __contains__(self, normalized: object) -> bool:
        return normalized in self._exact

    def candidates(self, length: int, spread: int) -> Iterator[CorpusEntry]:
        """Entries with |entry.length - length| <= spread, in corpus order."""
        lo = max(0, length - spread)
        positions = [self._buckets[n] for n in range(lo, length + spread + 1) if n in self._buckets]
        for pos in heapq.merge(*positions):
            yield self._entries[pos]


_default: Optional[CorpusIndex] = None
_default_lock = threading.Lock()


def default_index() -> CorpusIndex:
    """
    Process-wide corpus index, built on first call.
    Concurrent first callers wait for the single build and share its result.
    """
    global _default
    index = _default
    if index is not None:
        return index
    with _default_lock:
        if _default is None:
            path = config.corpus_path()
            _default = CorpusIndex.from_path(path) if path else CorpusIndex.bundled()
            logger.debug("default corpus index ready (%s)", _default.source)
        return _default


def reset_default_index() -> None:
    """Forget the cached default index (tests, or after changing PASSCORE_CORPUS_PATH)."""
    global _default
    with _default_lock:
        _default = None
