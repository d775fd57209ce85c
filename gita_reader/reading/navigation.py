from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Type, Union

from .content import ContentIndex
from .models import Verse
from .state import ReadingStateStore
from .views import neighbor_verses

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Home:
    pass


@dataclass(frozen=True)
class Settings:
    pass


@dataclass(frozen=True)
class ChapterScreen:
    chapter_number: int


@dataclass(frozen=True)
class VerseScreen:
    verse_id: int
    chapter_number: int


Screen = Union[Home, Settings, ChapterScreen, VerseScreen]

# Back always lands on a fixed target per screen kind, however the screen was
# reached. There is no history stack.
BACK_TARGETS: Dict[Type, Callable[..., Screen]] = {
    Home: lambda screen: Home(),
    Settings: lambda screen: Home(),
    ChapterScreen: lambda screen: Home(),
    VerseScreen: lambda screen: ChapterScreen(screen.chapter_number),
}


class NavigationController:
    """
    Screen state machine over Home, Settings, Chapter(n) and Verse(id, n).
    Starts on Home and lives for the whole session. Each transition returns
    the resulting screen; a transition that is not allowed from the current
    screen, or that names content missing from the index, leaves the current
    screen in place.
    """

    def __init__(self, index: ContentIndex, state: ReadingStateStore):
        self.index = index
        self.state = state
        self.screen: Screen = Home()

    def _stay(self, reason: str, *args) -> Screen:
        logger.debug("Navigation ignored on %s: " + reason, self.screen, *args)
        return self.screen

    def select_chapter(self, chapter_number: int) -> Screen:
        if not isinstance(self.screen, Home):
            return self._stay("chapter selection only from home")
        if self.index.chapter_by_number(chapter_number) is None:
            return self._stay("unknown chapter %s", chapter_number)
        self.screen = ChapterScreen(chapter_number)
        return self.screen

    def select_verse(self, verse_id: int) -> Screen:
        current = self.screen
        if not isinstance(current, ChapterScreen):
            return self._stay("verse selection only from a chapter")
        verse = self.index.verse_by_id(verse_id)
        if verse is None or verse.chapter_number != current.chapter_number:
            return self._stay("verse %s not in chapter %s", verse_id, current.chapter_number)
        self.state.mark_read(verse_id)
        self.screen = VerseScreen(verse_id, current.chapter_number)
        return self.screen

    def open_daily_verse(self, verse: Verse) -> Screen:
        if not isinstance(self.screen, Home):
            return self._stay("daily verse only from home")
        if self.index.verse_by_id(verse.id) is None:
            return self._stay("daily verse %s not in index", verse.id)
        self.screen = VerseScreen(verse.id, verse.chapter_number)
        return self.screen

    def neighbors(self) -> Tuple[Optional[int], Optional[int]]:
        current = self.screen
        if not isinstance(current, VerseScreen):
            return None, None
        return neighbor_verses(self.index.verses_for_chapter(current.chapter_number), current.verse_id)

    def swipe_previous(self) -> Screen:
        return self._swipe_to(self.neighbors()[0])

    def swipe_next(self) -> Screen:
        return self._swipe_to(self.neighbors()[1])

    def _swipe_to(self, target_id: Optional[int]) -> Screen:
        current = self.screen
        if not isinstance(current, VerseScreen):
            return self._stay("swipe only on a verse")
        if target_id is None:
            return self._stay("no neighbor in that direction")
        self.screen = VerseScreen(target_id, current.chapter_number)
        return self.screen

    def open_settings(self) -> Screen:
        if not isinstance(self.screen, Home):
            return self._stay("settings only from home")
        self.screen = Settings()
        return self.screen

    def back(self) -> Screen:
        self.screen = BACK_TARGETS[type(self.screen)](self.screen)
        return self.screen
