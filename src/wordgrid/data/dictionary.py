# Word list loading for the engine.
# Accepts either a JSON asset ({"words": [...]} or a bare list) or a plain
# text file with one word per line.

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

DEFAULT_WORDS_FILE = Path(__file__).parent / "words.txt"


class Dictionary(object):
    """Read-only set of lowercase words."""

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(
            w.strip().lower() for w in words if w and w.strip()
        )

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"


def _read_words(path: Path) -> Iterable[str]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
        if isinstance(data, dict):
            if "words" not in data:
                raise ValueError(f"Missing \"words\" key in {path}")
            data = data["words"]
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of words in {path}")
        return [str(w) for w in data]
    return [
        line for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]


def load_dictionary(path: Optional[Union[str, Path]] = None) -> Dictionary:
    """
    Load a word list from disk.

    Args:
        path: JSON or text word list; the bundled list when None

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if path is None:
        return default_dictionary()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    return Dictionary(_read_words(path))


@lru_cache(maxsize=1)
def default_dictionary() -> Dictionary:
    """The bundled word list, loaded once per process."""
    return Dictionary(_read_words(DEFAULT_WORDS_FILE))
