"""Word list used by the computer player."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skrabbkle.core.errors import ResourceError

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIST_PATH = Path(__file__).resolve().parent / "data" / "wordlist.txt"


def read_word_list(path: str | Path) -> list[str]:
    """Read a newline-delimited word list.

    Raises ResourceError if the file cannot be read.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceError(str(path), str(exc)) from exc


class Dictionary:
    """Case-insensitive set of words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        for word in words:
            word = word.strip().upper()
            if word:
                self._words.add(word)

    @classmethod
    def from_file(cls, path: str | Path) -> Dictionary:
        """Load a word list, degrading to an empty dictionary if unreadable."""
        try:
            lines = read_word_list(path)
        except ResourceError as exc:
            logger.warning("%s -- the computer player will always pass", exc)
            return cls()
        dictionary = cls(lines)
        logger.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        return dictionary

    @classmethod
    def default(cls) -> Dictionary:
        return cls.from_file(DEFAULT_WORD_LIST_PATH)

    def is_valid(self, word: str) -> bool:
        if not word:
            return False
        return word.upper() in self._words

    def __len__(self) -> int:
        return len(self._words)
