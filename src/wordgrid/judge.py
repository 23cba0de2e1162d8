"""
Word validation and scoring.

A submitted word is accepted when it is non-empty, has not been accepted
before in this session (exact string match), and its lowercase form is in
the dictionary. Accepted words score their length.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from .data import Dictionary
from .errors import DuplicateWordError, UnknownWordError


def score_word(word: str) -> int:
    """Points for an accepted word: one per character."""
    return len(word)


class WordJudge(BaseModel):
    """Validates finished words against a dictionary and the submission history."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dictionary: Dictionary

    def is_known(self, word: str) -> bool:
        return word.lower() in self.dictionary

    def submit(self, word: str, history: List[str]) -> Optional[int]:
        """
        Judge a finished word and record it on acceptance.

        Args:
            word: The candidate word, as traced on the grid
            history: Words accepted so far; appended to on success

        Returns:
            Points earned, or None if the word was empty (nothing to judge)

        Raises:
            DuplicateWordError: If the exact word was already accepted
            UnknownWordError: If the word is not in the dictionary
        """
        if not word:
            return None

        if word in history:
            raise DuplicateWordError(f'"{word}" has already been submitted.')

        if not self.is_known(word):
            raise UnknownWordError(f'"{word}" is not in the dictionary.')

        history.append(word)
        return score_word(word)
