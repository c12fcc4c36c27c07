"""
Immutable keyword configuration shared by the sentiment scorer and theme extractor.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from utils.keywords import NEGATIVE_WORDS, POSITIVE_WORDS, THEME_KEYWORDS


def _normalize(words: Iterable[str]) -> Tuple[str, ...]:
    return tuple(word.lower() for word in words if word)


@dataclass(frozen=True)
class Lexicon:
    positive: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()
    themes: Tuple[str, ...] = ()

    @classmethod
    def from_words(
        cls,
        positive: Iterable[str] = (),
        negative: Iterable[str] = (),
        themes: Iterable[str] = (),
    ) -> "Lexicon":
        return cls(positive=_normalize(positive), negative=_normalize(negative), themes=_normalize(themes))


DEFAULT_LEXICON = Lexicon.from_words(POSITIVE_WORDS, NEGATIVE_WORDS, THEME_KEYWORDS)
