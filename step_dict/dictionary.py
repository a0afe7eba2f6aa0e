"""Dictionary Table: the fixed, sorted universe of valid words.

The table is built once per process from either the bundled word list or the
file named by ``STEP_DICT_WORD_LIST``, and never changes afterwards. Lookups
are binary searches, so the list must already be sorted ascending and free of
duplicates; the loader trusts its input and does not check either property.
"""

import threading
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from importlib import resources
from pathlib import Path

from loguru import logger

from step_dict.config import get_settings

BUNDLED_PACKAGE = "step_dict.data"
BUNDLED_RESOURCE = "words.txt"


class WordNotFoundError(LookupError):
    """Raised when an operation needs the position of a word the table lacks.

    Every Word handed to a stepping operation must name a dictionary entry.
    This error marks a broken caller, not an expected outcome.
    """

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"word not found in dictionary: {word!r}")


class DictionaryTable:
    """Immutable, lexicographically sorted sequence of distinct words."""

    __slots__ = ("_words", "source")

    def __init__(self, words: Iterable[str], source: str = "<memory>"):
        self._words = tuple(words)
        self.source = source

    @classmethod
    def from_file(cls, file_path: str | Path) -> "DictionaryTable":
        """Load a table from a text file with one word per line.

        Leading/trailing whitespace is stripped and blank lines are skipped.

        Args:
            file_path: Path to the sorted word list

        Returns:
            The loaded table

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not UTF-8 or holds no words
        """
        path = Path(file_path)

        if not path.exists():
            error_msg = f"Word list file not found: {file_path}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        logger.info(f"Loading dictionary from: {file_path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                words = _parse_lines(f)
        except UnicodeDecodeError as e:
            logger.error(f"Failed to decode file with UTF-8 encoding: {file_path}", exc_info=True)
            encoding_error_msg = f"File encoding error: {e}"
            raise ValueError(encoding_error_msg) from e

        return cls._checked(words, str(path))

    @classmethod
    def load_bundled(cls) -> "DictionaryTable":
        """Load the word list shipped inside the package."""
        resource = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_RESOURCE)
        logger.info(f"Loading bundled dictionary: {BUNDLED_PACKAGE}/{BUNDLED_RESOURCE}")
        with resource.open("r", encoding="utf-8") as f:
            words = _parse_lines(f)
        return cls._checked(words, f"bundled:{BUNDLED_RESOURCE}")

    @classmethod
    def _checked(cls, words: list[str], source: str) -> "DictionaryTable":
        if not words:
            error_msg = f"Word list is empty: {source}"
            logger.error(error_msg)
            raise ValueError(error_msg)
        logger.info(f"Loaded {len(words)} words from {source}")
        return cls(words, source)

    def index_of(self, word: str) -> int | None:
        """Return the zero-based position of ``word``, or None if absent."""
        i = bisect_left(self._words, word)
        if i < len(self._words) and self._words[i] == word:
            return i
        return None

    def word_at(self, index: int) -> str | None:
        """Return the word at ``index``, or None outside ``0 <= index < len``.

        Negative indices are out of bounds; they never wrap to the end.
        """
        if 0 <= index < len(self._words):
            return self._words[index]
        return None

    def require_index(self, word: str) -> int:
        """Return the position of ``word``; raise WordNotFoundError if absent."""
        index = self.index_of(word)
        if index is None:
            logger.debug(f"Word not found in dictionary ({self.source}): {word!r}")
            raise WordNotFoundError(word)
        return index

    @property
    def first(self) -> str:
        return self._words[0]

    @property
    def last(self) -> str:
        return self._words[-1]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.index_of(word) is not None

    def __repr__(self) -> str:
        return f"DictionaryTable(source={self.source!r}, size={len(self._words)})"


def _parse_lines(lines: Iterable[str]) -> list[str]:
    words = []
    for line in lines:
        word = line.strip()
        if word:
            words.append(word)
    return words


_dictionary: DictionaryTable | None = None
_lock = threading.Lock()


def get_dictionary(word_list: str | Path | None = None) -> DictionaryTable:
    """Return the process-wide table, loading it on first call.

    The first call decides the source: ``word_list`` if given, else the
    ``STEP_DICT_WORD_LIST`` setting, else the bundled list. Later calls
    return the same table and ignore ``word_list``. Concurrent first calls
    load the table exactly once.
    """
    global _dictionary
    table = _dictionary
    if table is not None:
        return table

    with _lock:
        if _dictionary is None:
            source = word_list or get_settings().word_list
            if source:
                _dictionary = DictionaryTable.from_file(source)
            else:
                _dictionary = DictionaryTable.load_bundled()
        return _dictionary
