from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache
from typing import Optional

from fastapi import HTTPException

from gita_reader.reading import Chapter, ReaderConfig, ReaderSession, Verse


@lru_cache(maxsize=1)
def get_session() -> ReaderSession:
    return ReaderSession.from_config(ReaderConfig.from_env())


def require_chapter(session: ReaderSession, chapter_number: int) -> Chapter:
    chapter = session.index.chapter_by_number(chapter_number)
    if not chapter:
        raise HTTPException(status_code=404, detail=f"Chapter not found: {chapter_number}")
    return chapter


def require_verse(session: ReaderSession, verse_id: int) -> Verse:
    verse = session.index.verse_by_id(verse_id)
    if not verse:
        raise HTTPException(status_code=404, detail=f"Verse not found: {verse_id}")
    return verse


def chapter_summary(chapter: Chapter) -> dict:
    return {
        "chapter_number": chapter.chapter_number,
        "name": chapter.name,
        "name_transliterated": chapter.name_transliterated,
        "name_translation": chapter.name_translation,
        "verses_count": chapter.verses_count,
    }


def verse_payload(session: ReaderSession, verse: Optional[Verse]) -> Optional[dict]:
    if verse is None:
        return None
    payload = asdict(verse)
    payload["bookmarked"] = session.state.is_bookmarked(verse.id)
    payload["read"] = session.state.is_read(verse.id)
    payload["has_note"] = bool(session.state.get_note(verse.id).strip())
    return payload
