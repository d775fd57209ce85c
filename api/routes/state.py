from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from gita_reader.reading import ReaderSession, bookmarked_verses, progress

from api.dependencies import get_session, verse_payload

router = APIRouter(prefix="/state", tags=["state"])


@router.get("/bookmarks")
def list_bookmarks(session: ReaderSession = Depends(get_session)):
    with session.lock:
        return [verse_payload(session, v) for v in bookmarked_verses(session.index, session.state)]


@router.post("/bookmarks/{verse_id}/toggle")
def toggle_bookmark(verse_id: int, session: ReaderSession = Depends(get_session)):
    with session.lock:
        return {"verse_id": verse_id, "bookmarked": session.state.toggle_bookmark(verse_id)}


@router.get("/notes/{verse_id}")
def get_note(verse_id: int, session: ReaderSession = Depends(get_session)):
    with session.lock:
        return {"verse_id": verse_id, "note": session.state.get_note(verse_id)}


@router.put("/notes/{verse_id}")
def put_note(verse_id: int, text: str = Body("", embed=True), session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.state.set_note(verse_id, text)
        return {"verse_id": verse_id, "note": session.state.get_note(verse_id)}


@router.get("/progress")
def get_progress(session: ReaderSession = Depends(get_session)):
    with session.lock:
        total = session.index.verse_count
        read = session.state.read_count
        return {"read": read, "total": total, "percent": progress(read, total)}


@router.get("/font-size")
def get_font_size(session: ReaderSession = Depends(get_session)):
    with session.lock:
        return {"font_size": session.state.get_font_size()}


@router.put("/font-size")
def put_font_size(size: int = Body(..., embed=True), session: ReaderSession = Depends(get_session)):
    with session.lock:
        return {"font_size": session.change_font_size(size)}
