from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from .assets import AssetPaths, LocalAssetLoader
from .content import ContentIndex
from .indexing import NoopVerseIndexer, VerseIndexer, WhooshVerseIndexer
from .models import Chapter, Commentary, Translation, Verse
from .navigation import ChapterScreen, Home, NavigationController, Settings, VerseScreen
from .repository import PreferencesRepository, SqlAlchemyPreferencesRepository
from .state import DEFAULT_FONT_SIZE, ReadingStateStore
from .views import (
    CHAPTER_SEARCH_FIELDS,
    VERSE_SEARCH_FIELDS,
    neighbor_verses,
    progress,
    search_filter,
    select_daily_verse,
)

logger = logging.getLogger(__name__)

FONT_SIZE_MIN = 12
FONT_SIZE_MAX = 30


@dataclass
class ReaderConfig:
    asset_root: str = "./assets"
    database_url: str = "sqlite+pysqlite:///./data/gita_reader.db"
    whoosh_index_dir: Optional[str] = None
    default_font_size: int = DEFAULT_FONT_SIZE

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        return cls(
            asset_root=os.getenv("ASSET_ROOT", "./assets"),
            database_url=os.getenv("DATABASE_URL", "sqlite+pysqlite:///./data/gita_reader.db"),
            whoosh_index_dir=os.getenv("WHOOSH_DIR") or None,
            default_font_size=int(os.getenv("DEFAULT_FONT_SIZE", str(DEFAULT_FONT_SIZE))),
        )


@dataclass
class VerseItem:
    verse: Verse
    bookmarked: bool
    read: bool
    has_note: bool = False


@dataclass
class HomeView:
    daily_verse: Verse
    chapters: List[Chapter]
    read_count: int
    total_count: int
    progress_percent: Optional[int]
    query: str = ""


@dataclass
class SettingsView:
    font_size: int
    min_font_size: int = FONT_SIZE_MIN
    max_font_size: int = FONT_SIZE_MAX


@dataclass
class ChapterView:
    # None when the chapters collection lacks this number (e.g. back from the
    # daily verse with chapters missing)
    chapter: Optional[Chapter]
    verses: List[VerseItem]
    query: str = ""


@dataclass
class VerseView:
    verse: Verse
    chapter_number: int
    previous_id: Optional[int]
    next_id: Optional[int]
    translations: List[Translation] = field(default_factory=list)
    commentaries: List[Commentary] = field(default_factory=list)
    bookmarked: bool = False
    note: str = ""


View = Union[HomeView, SettingsView, ChapterView, VerseView]


class ReaderSession:
    """
    Composition root for one reader: the content index, the reading-state
    store, the navigation controller and an optional full-text indexer.

    The core is written for a single caller at a time. Hosts that call into a
    session from several threads (the HTTP API does) hold ``lock`` around
    each call.
    """

    def __init__(
        self,
        index: ContentIndex,
        state: ReadingStateStore,
        indexer: Optional[VerseIndexer] = None,
        today: Optional[date] = None,
    ):
        self.index = index
        self.state = state
        self.navigation = NavigationController(index, state)
        self.indexer: VerseIndexer = indexer or NoopVerseIndexer()
        self.query = ""
        self.lock = threading.RLock()
        # Fixed day for tests; None follows the calendar.
        self.today = today

    @classmethod
    def from_config(cls, config: ReaderConfig, repository: Optional[PreferencesRepository] = None) -> "ReaderSession":
        index = LocalAssetLoader(AssetPaths(Path(config.asset_root))).load_index()
        if repository is None:
            _ensure_sqlite_dir(config.database_url)
            repository = SqlAlchemyPreferencesRepository(config.database_url)
        state = ReadingStateStore(repository, default_font_size=config.default_font_size)
        indexer: VerseIndexer = NoopVerseIndexer()
        if config.whoosh_index_dir:
            indexer = WhooshVerseIndexer(Path(config.whoosh_index_dir))
            indexer.index_verses(index.verses, _all_translations(index))
        return cls(index, state, indexer=indexer)

    @property
    def daily_verse(self) -> Verse:
        return select_daily_verse(self.index.verses, self.today or date.today())

    @property
    def screen(self):
        return self.navigation.screen

    def set_query(self, query: str) -> None:
        self.query = query or ""

    def current_view(self) -> View:
        """Build the data for whichever screen is active."""
        screen = self.navigation.screen
        if isinstance(screen, Home):
            return self._home_view()
        if isinstance(screen, Settings):
            return SettingsView(font_size=self.state.font_size)
        if isinstance(screen, ChapterScreen):
            chapter_number = screen.chapter_number
            chapter = self.index.chapter_by_number(chapter_number)
            verses = search_filter(self.query, self.index.verses_for_chapter(chapter_number), VERSE_SEARCH_FIELDS)
            return ChapterView(
                chapter=chapter,
                verses=[
                    VerseItem(
                        verse=v,
                        bookmarked=self.state.is_bookmarked(v.id),
                        read=self.state.is_read(v.id),
                        has_note=bool(self.state.get_note(v.id).strip()),
                    )
                    for v in verses
                ],
                query=self.query,
            )
        if isinstance(screen, VerseScreen):
            verse_id, chapter_number = screen.verse_id, screen.chapter_number
            previous_id, next_id = neighbor_verses(self.index.verses_for_chapter(chapter_number), verse_id)
            return VerseView(
                verse=self.index.verse_by_id(verse_id),
                chapter_number=chapter_number,
                previous_id=previous_id,
                next_id=next_id,
                translations=self.index.translations_for_verse(verse_id),
                commentaries=self.index.commentaries_for_verse(verse_id),
                bookmarked=self.state.is_bookmarked(verse_id),
                note=self.state.get_note(verse_id),
            )
        raise TypeError(f"Unknown screen {screen!r}")

    def _home_view(self) -> HomeView:
        total = self.index.verse_count
        return HomeView(
            daily_verse=self.daily_verse,
            chapters=search_filter(self.query, self.index.chapters, CHAPTER_SEARCH_FIELDS),
            read_count=self.state.read_count,
            total_count=total,
            progress_percent=progress(self.state.read_count, total),
            query=self.query,
        )

    def open_daily_verse(self):
        return self.navigation.open_daily_verse(self.daily_verse)

    def change_font_size(self, size: int) -> int:
        clamped = max(FONT_SIZE_MIN, min(FONT_SIZE_MAX, int(size)))
        self.state.update_font_size(clamped)
        return clamped

    def share_text(self, verse_id: int) -> str:
        verse = self.index.verse_by_id(verse_id)
        return verse.text if verse else ""

    def search_verses(self, query: str, limit: int = 10) -> List[dict]:
        return self.indexer.search(query, limit=limit)


def _all_translations(index: ContentIndex) -> List[Translation]:
    translations: List[Translation] = []
    for verse in index.verses:
        translations.extend(index.translations_for_verse(verse.id))
    return translations


def _ensure_sqlite_dir(database_url: str) -> None:
    prefix = "sqlite+pysqlite:///"
    if database_url.startswith(prefix) and database_url != prefix + ":memory:":
        Path(database_url[len(prefix):]).parent.mkdir(parents=True, exist_ok=True)
