from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from gita_reader.reading import ReaderSession, neighbor_verses

from api.dependencies import get_session, require_verse, verse_payload

router = APIRouter(prefix="/verses", tags=["verses"])


@router.get("/search")
def search_verses(query: str, limit: int = 20, session: ReaderSession = Depends(get_session)):
    if not query or not query.strip():
        raise HTTPException(status_code=400, detail="Query must not be empty")
    with session.lock:
        return {"hits": session.search_verses(query, limit=limit)}


@router.get("/{verse_id}")
def get_verse(verse_id: int, session: ReaderSession = Depends(get_session)):
    with session.lock:
        verse = require_verse(session, verse_id)
        prev_id, next_id = neighbor_verses(session.index.verses_for_chapter(verse.chapter_number), verse_id)
        return {
            "verse": verse_payload(session, verse),
            "previous_id": prev_id,
            "next_id": next_id,
            "translations": [asdict(t) for t in session.index.translations_for_verse(verse_id)],
            "commentaries": [asdict(c) for c in session.index.commentaries_for_verse(verse_id)],
            "note": session.state.get_note(verse_id),
        }


@router.get("/{verse_id}/share")
def share_verse(verse_id: int, session: ReaderSession = Depends(get_session)):
    with session.lock:
        require_verse(session, verse_id)
        return {"text": session.share_text(verse_id)}
