from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, TypeVar

from .models import Chapter, Commentary, Translation, Verse

logger = logging.getLogger(__name__)

T = TypeVar("T")

RawCollection = Optional[Any]


def _require_int(record: Mapping[str, Any], key: str) -> int:
    value = record[key]
    # bool is an int subclass but never a valid id or number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    return value


def _require_str(record: Mapping[str, Any], key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {value!r}")
    return value


def _optional_str(record: Mapping[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key} must be a string or null, got {value!r}")
    return value


def parse_chapter(record: Mapping[str, Any]) -> Chapter:
    return Chapter(
        id=_require_int(record, "id"),
        name=_require_str(record, "name"),
        name_transliterated=_require_str(record, "name_transliterated"),
        name_translation=_require_str(record, "name_translation"),
        verses_count=_require_int(record, "verses_count"),
        chapter_number=_require_int(record, "chapter_number"),
        name_meaning=_require_str(record, "name_meaning"),
        chapter_summary=_require_str(record, "chapter_summary"),
        chapter_summary_hindi=_require_str(record, "chapter_summary_hindi"),
        image_name=_optional_str(record, "image_name"),
    )


def parse_verse(record: Mapping[str, Any]) -> Verse:
    return Verse(
        id=_require_int(record, "id"),
        verse_number=_require_int(record, "verse_number"),
        chapter_number=_require_int(record, "chapter_number"),
        text=_require_str(record, "text"),
        transliteration=_require_str(record, "transliteration"),
        word_meanings=_require_str(record, "word_meanings"),
    )


def parse_translation(record: Mapping[str, Any]) -> Translation:
    return Translation(
        author_name=_optional_str(record, "author_name"),
        description=_require_str(record, "description"),
        verse_id=_require_int(record, "verse_id"),
    )


def parse_commentary(record: Mapping[str, Any]) -> Commentary:
    return Commentary(
        author_name=_optional_str(record, "author_name"),
        description=_require_str(record, "description"),
        verse_id=_require_int(record, "verse_id"),
    )


def parse_collection(name: str, raw: RawCollection, parse: Callable[[Mapping[str, Any]], T]) -> List[T]:
    """
    Best-effort parse of one source collection. Anything other than a list of
    well-formed records yields an empty list; there is no partial recovery.
    """
    if raw is None:
        logger.warning("Content collection %s is missing; using an empty collection", name)
        return []
    if not isinstance(raw, list):
        logger.warning("Content collection %s is not a list; using an empty collection", name)
        return []
    try:
        return [parse(record) for record in raw]
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        logger.warning("Content collection %s is malformed (%s); using an empty collection", name, exc)
        return []


class ContentIndex:
    """
    Read-only index over the four content collections, cross-referenced by
    chapter number and verse id. Built once at startup.
    """

    def __init__(
        self,
        chapters: Sequence[Chapter] = (),
        verses: Sequence[Verse] = (),
        translations: Sequence[Translation] = (),
        commentaries: Sequence[Commentary] = (),
    ):
        self.chapters: List[Chapter] = list(chapters)
        self.verses: List[Verse] = list(verses)
        self._chapters_by_number: Dict[int, Chapter] = {}
        for chapter in self.chapters:
            # First occurrence wins if the source repeats a chapter number.
            self._chapters_by_number.setdefault(chapter.chapter_number, chapter)
        self._verses_by_id: Dict[int, Verse] = {}
        self._verses_by_chapter: Dict[int, List[Verse]] = defaultdict(list)
        for verse in self.verses:
            self._verses_by_id.setdefault(verse.id, verse)
            self._verses_by_chapter[verse.chapter_number].append(verse)
        for chapter_verses in self._verses_by_chapter.values():
            chapter_verses.sort(key=lambda v: v.verse_number)
        self._translations: Dict[int, List[Translation]] = defaultdict(list)
        for translation in translations:
            self._translations[translation.verse_id].append(translation)
        self._commentaries: Dict[int, List[Commentary]] = defaultdict(list)
        for commentary in commentaries:
            self._commentaries[commentary.verse_id].append(commentary)

    @classmethod
    def load(
        cls,
        chapters: RawCollection = None,
        verses: RawCollection = None,
        translations: RawCollection = None,
        commentaries: RawCollection = None,
    ) -> "ContentIndex":
        """
        Build an index from raw decoded collections (lists of mappings). A
        collection that is absent or malformed is treated as empty.
        """
        index = cls(
            chapters=parse_collection("chapters", chapters, parse_chapter),
            verses=parse_collection("verses", verses, parse_verse),
            translations=parse_collection("translations", translations, parse_translation),
            commentaries=parse_collection("commentaries", commentaries, parse_commentary),
        )
        logger.info(
            "Content index loaded: %d chapters, %d verses, %d translations, %d commentaries",
            len(index.chapters),
            len(index.verses),
            sum(len(v) for v in index._translations.values()),
            sum(len(v) for v in index._commentaries.values()),
        )
        return index

    @property
    def verse_count(self) -> int:
        return len(self.verses)

    def chapter_by_number(self, chapter_number: int) -> Optional[Chapter]:
        return self._chapters_by_number.get(chapter_number)

    def verses_for_chapter(self, chapter_number: int) -> List[Verse]:
        return list(self._verses_by_chapter.get(chapter_number, ()))

    def verse_by_id(self, verse_id: int) -> Optional[Verse]:
        return self._verses_by_id.get(verse_id)

    def translations_for_verse(self, verse_id: int) -> List[Translation]:
        return list(self._translations.get(verse_id, ()))

    def commentaries_for_verse(self, verse_id: int) -> List[Commentary]:
        return list(self._commentaries.get(verse_id, ()))
