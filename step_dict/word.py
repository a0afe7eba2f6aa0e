"""Steppable Word Value.

A Word is a word understood as "whatever position it occupies in the
dictionary". Only the text is stored; every operation looks the position up
again with a binary search.

Precondition for every stepping operation: the word must be in the dictionary.
A Word can be built from any string, but stepping from a word the table lacks
raises WordNotFoundError. Running off either end of the table is the normal
end-of-sequence outcome and is reported as None.

Example:
    >>> from step_dict import Word, word_range
    >>> [str(w) for w in word_range("rust", "rusty")]
    ['rust', 'rustic', 'rustle', 'rustler', 'rustling']
"""

from dataclasses import dataclass

from step_dict.dictionary import get_dictionary


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        msg = f"step count must be an int, got {type(count).__name__}"
        raise TypeError(msg)
    if count < 0:
        msg = f"step count must be non-negative, got {count}"
        raise ValueError(msg)


@dataclass(frozen=True, order=True, slots=True)
class Word:
    """A dictionary word that can be stepped forward and backward.

    Equality and ordering are those of the underlying string.
    """

    text: str

    def __str__(self) -> str:
        return self.text

    @staticmethod
    def steps_between(start: "Word", end: "Word") -> int | None:
        """Return the number of forward steps from ``start`` to ``end``.

        Returns None when ``end`` comes before ``start``; distances are
        forward-only.

        Raises:
            WordNotFoundError: If either word is not in the dictionary
        """
        table = get_dictionary()
        start_index = table.require_index(start.text)
        end_index = table.require_index(end.text)
        if end_index < start_index:
            return None
        return end_index - start_index

    @staticmethod
    def forward_checked(start: "Word", count: int) -> "Word | None":
        """Return the word ``count`` places after ``start``.

        Returns None when that runs past the last dictionary word.

        Raises:
            WordNotFoundError: If ``start`` is not in the dictionary
            TypeError: If ``count`` is not an int
            ValueError: If ``count`` is negative
        """
        _check_count(count)
        table = get_dictionary()
        text = table.word_at(table.require_index(start.text) + count)
        return None if text is None else Word(text)

    @staticmethod
    def backward_checked(start: "Word", count: int) -> "Word | None":
        """Return the word ``count`` places before ``start``.

        Returns None when that runs before the first dictionary word.

        Raises:
            WordNotFoundError: If ``start`` is not in the dictionary
            TypeError: If ``count`` is not an int
            ValueError: If ``count`` is negative
        """
        _check_count(count)
        table = get_dictionary()
        target = table.require_index(start.text) - count
        # word_at rejects negative indices, so underflow never wraps
        text = table.word_at(target)
        return None if text is None else Word(text)

    def successor(self) -> "Word | None":
        return Word.forward_checked(self, 1)

    def predecessor(self) -> "Word | None":
        return Word.backward_checked(self, 1)
