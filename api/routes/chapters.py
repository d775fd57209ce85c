from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends

from gita_reader.reading import CHAPTER_SEARCH_FIELDS, VERSE_SEARCH_FIELDS, ReaderSession, search_filter

from api.dependencies import chapter_summary, get_session, require_chapter, verse_payload

router = APIRouter(prefix="/chapters", tags=["chapters"])


@router.get("")
def list_chapters(q: Optional[str] = None, session: ReaderSession = Depends(get_session)):
    with session.lock:
        chapters = search_filter(q, session.index.chapters, CHAPTER_SEARCH_FIELDS)
        return [chapter_summary(ch) for ch in chapters]


@router.get("/{chapter_number}")
def get_chapter(chapter_number: int, q: Optional[str] = None, session: ReaderSession = Depends(get_session)):
    with session.lock:
        chapter = require_chapter(session, chapter_number)
        verses = search_filter(q, session.index.verses_for_chapter(chapter_number), VERSE_SEARCH_FIELDS)
        return {
            "chapter": asdict(chapter),
            "verses": [verse_payload(session, v) for v in verses],
        }
