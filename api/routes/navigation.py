from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Body, Depends

from gita_reader.reading import ChapterScreen, Home, ReaderSession, Settings, VerseScreen

from api.dependencies import get_session

router = APIRouter(prefix="/navigation", tags=["navigation"])

_SCREEN_NAMES = {Home: "home", Settings: "settings", ChapterScreen: "chapter", VerseScreen: "verse"}


def _snapshot(session: ReaderSession) -> dict:
    screen = session.screen
    return {
        "screen": {"kind": _SCREEN_NAMES[type(screen)], **asdict(screen)},
        "view": asdict(session.current_view()),
    }


@router.get("")
def current(session: ReaderSession = Depends(get_session)):
    with session.lock:
        return _snapshot(session)


@router.put("/query")
def set_query(query: Optional[str] = Body(None, embed=True), session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.set_query(query or "")
        return _snapshot(session)


@router.post("/chapters/{chapter_number}")
def select_chapter(chapter_number: int, session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.navigation.select_chapter(chapter_number)
        return _snapshot(session)


@router.post("/verses/{verse_id}")
def select_verse(verse_id: int, session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.navigation.select_verse(verse_id)
        return _snapshot(session)


@router.post("/daily-verse")
def open_daily_verse(session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.open_daily_verse()
        return _snapshot(session)


@router.post("/previous")
def swipe_previous(session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.navigation.swipe_previous()
        return _snapshot(session)


@router.post("/next")
def swipe_next(session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.navigation.swipe_next()
        return _snapshot(session)


@router.post("/settings")
def open_settings(session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.navigation.open_settings()
        return _snapshot(session)


@router.post("/back")
def back(session: ReaderSession = Depends(get_session)):
    with session.lock:
        session.navigation.back()
        return _snapshot(session)
