"""Greedy word wrap against an arbitrary width oracle.

`measure` is any callable mapping a string to its rendered width. Results
are lists of split points: the cumulative character offset at the end of
each visual segment, the last one being the length of the line. An empty
list means the line fits and is not wrapped.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

Measure = Callable[[str], float]


def _words(line: str) -> Iterator[Tuple[int, int]]:
    """Yield (start, end) offsets of the runs of non-whitespace in line."""
    start: Optional[int] = None
    for i, ch in enumerate(line):
        if ch.isspace():
            if start is not None:
                yield start, i
                start = None
        elif start is None:
            start = i
    if start is not None:
        yield start, len(line)


def wrap_word(line: str, measure: Measure, limit: float,
              start: int = 0, end: Optional[int] = None) -> List[int]:
    """Split line[start:end] character by character to fit within limit.

    Returns the offsets at which new segments begin, excluding `start`.
    Every piece holds at least one character, so a character wider than
    the limit gets a segment of its own.
    """
    if end is None:
        end = len(line)
    cuts: List[int] = []
    for i in range(start + 1, end):
        if measure(line[start:i + 1]) > limit:
            cuts.append(i)
            start = i
    return cuts


def wrap_line(line: str, measure: Measure, limit: float) -> List[int]:
    """Return the split points for wrapping line to limit.

    Words are kept whole where possible; the whitespace after a word stays
    at the end of its segment and never causes a wrap by itself. A word
    that is wider than the limit on its own is split by `wrap_word`.
    """
    if measure(line) <= limit:
        return []

    points: List[int] = []
    start = 0
    for word_start, word_end in _words(line):
        if measure(line[start:word_end]) <= limit:
            continue
        # Another word precedes this one on the segment: break before it.
        # Leading whitespace alone is split together with the word.
        if start < word_start and not line[start:word_start].isspace():
            points.append(word_start)
            start = word_start
        # The word alone is still too wide
        if measure(line[start:word_end]) > limit:
            cuts = wrap_word(line, measure, limit, start, word_end)
            logger.debug("splitting long word %r into %d pieces",
                         line[start:word_end], len(cuts) + 1)
            points.extend(cuts)
            if cuts:
                start = cuts[-1]

    if not points:
        return []
    points.append(len(line))
    return points


def split_segments(line: str, points: List[int]) -> List[str]:
    """Cut line at the given split points.

    Always returns at least one segment and never an empty trailing one.
    """
    segments: List[str] = []
    start = 0
    for point in points:
        segments.append(line[start:point])
        start = point
    if start < len(line) or not segments:
        segments.append(line[start:])
    return segments


class WrapCache:
    """Memoised wrap results keyed by line text.

    Wrapping is a pure function of the text, the measure and the limit, so
    identical lines share an entry. Changing the limit drops everything.
    """

    def __init__(self, measure: Measure, limit: Optional[float] = None):
        self.measure = measure
        self.limit = limit
        self._points: Dict[str, List[int]] = {}

    def set_limit(self, limit: Optional[float]) -> None:
        if limit != self.limit:
            self.limit = limit
            self.clear()

    def set_measure(self, measure: Measure) -> None:
        if measure is not self.measure:
            self.measure = measure
            self.clear()

    def points(self, line: str) -> List[int]:
        if self.limit is None:
            return []
        cached = self._points.get(line)
        if cached is None:
            cached = wrap_line(line, self.measure, self.limit)
            self._points[line] = cached
        return list(cached)

    def segments(self, line: str) -> List[str]:
        return split_segments(line, self.points(line))

    def invalidate(self, line: str) -> None:
        self._points.pop(line, None)

    def prune(self, lines: Iterable[str]) -> None:
        """Drop the entries of every text not among lines."""
        keep = set(lines)
        for line in [line for line in self._points if line not in keep]:
            del self._points[line]

    def clear(self) -> None:
        self._points.clear()

    def __len__(self) -> int:
        return len(self._points)
