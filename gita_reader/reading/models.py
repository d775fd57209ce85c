from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

PLACEHOLDER_TEXT = "..."


class ValueKind(str, Enum):
    STRING = "string"
    STRING_SET = "string_set"
    INT = "int"


@dataclass(frozen=True)
class Chapter:
    id: int
    name: str
    name_transliterated: str
    name_translation: str
    verses_count: int
    chapter_number: int
    name_meaning: str
    chapter_summary: str
    chapter_summary_hindi: str
    image_name: Optional[str] = None


@dataclass(frozen=True)
class Verse:
    id: int
    verse_number: int
    chapter_number: int
    text: str
    transliteration: str
    word_meanings: str

    @classmethod
    def placeholder(cls) -> "Verse":
        """
        Sentinel returned when there is nothing to select from. Id 0 never
        resolves in a content index, so navigating to it is a no-op.
        """
        return cls(
            id=0,
            verse_number=0,
            chapter_number=0,
            text=PLACEHOLDER_TEXT,
            transliteration=PLACEHOLDER_TEXT,
            word_meanings=PLACEHOLDER_TEXT,
        )


@dataclass(frozen=True)
class Translation:
    author_name: Optional[str]
    description: str
    verse_id: int


@dataclass(frozen=True)
class Commentary:
    author_name: Optional[str]
    description: str
    verse_id: int
