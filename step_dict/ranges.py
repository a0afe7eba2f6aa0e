"""Range iteration driven by the Word stepping operations.

WordRange only talks to Word through steps_between, forward_checked and
backward_checked, so iteration stops when a bound is reached or when a step
runs off the end of the dictionary.
"""

from collections.abc import Iterator

from loguru import logger

from step_dict.dictionary import get_dictionary
from step_dict.word import Word


def _as_word(value: "Word | str") -> Word:
    return value if isinstance(value, Word) else Word(value)


class WordRange:
    """Dictionary words from ``start`` up to ``end``.

    ``end`` is excluded unless ``inclusive`` is True. A range whose end
    precedes its start is empty. Both bounds must be dictionary words once
    the range is iterated, measured or indexed.
    """

    def __init__(self, start: "Word | str", end: "Word | str", inclusive: bool = False):
        self.start = _as_word(start)
        self.end = _as_word(end)
        self.inclusive = inclusive

    def __repr__(self) -> str:
        op = "..=" if self.inclusive else ".."
        return f"WordRange({self.start.text!r}{op}{self.end.text!r})"

    def __len__(self) -> int:
        steps = Word.steps_between(self.start, self.end)
        if steps is None:
            return 0
        return steps + 1 if self.inclusive else steps

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[Word]:
        remaining = len(self)
        logger.debug(f"Iterating {self!r} ({remaining} words)")
        current: Word | None = self.start
        while remaining > 0 and current is not None:
            yield current
            remaining -= 1
            current = Word.forward_checked(current, 1)

    def __reversed__(self) -> Iterator[Word]:
        remaining = len(self)
        if remaining == 0:
            return
        current: Word | None = Word.forward_checked(self.start, remaining - 1)
        while remaining > 0 and current is not None:
            yield current
            remaining -= 1
            current = Word.backward_checked(current, 1)

    def __getitem__(self, index: "int | slice") -> "Word | list[Word]":
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if isinstance(index, bool) or not isinstance(index, int):
            msg = f"WordRange indices must be integers or slices, not {type(index).__name__}"
            raise TypeError(msg)
        length = len(self)
        if index < 0:
            index += length
        if not 0 <= index < length:
            msg = "WordRange index out of range"
            raise IndexError(msg)
        word = Word.forward_checked(self.start, index)
        if word is None:
            msg = "WordRange index out of range"
            raise IndexError(msg)
        return word

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            item = Word(item)
        if not isinstance(item, Word):
            return False
        # raises WordNotFoundError for a bound outside the dictionary, as iteration does
        if Word.steps_between(self.start, self.end) is None:
            return False
        if item < self.start:
            return False
        if self.inclusive:
            if item > self.end:
                return False
        elif item >= self.end:
            return False
        return item.text in get_dictionary()


def word_range(start: "Word | str", end: "Word | str", inclusive: bool = False) -> WordRange:
    """Return the range of dictionary words between ``start`` and ``end``."""
    return WordRange(start, end, inclusive=inclusive)
