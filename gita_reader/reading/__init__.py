"""
Reading subsystem exports.
"""

from .assets import AssetPaths, LocalAssetLoader
from .codecs import decode_id_set, decode_notes, encode_id_set, encode_notes
from .content import ContentIndex
from .indexing import NoopVerseIndexer, VerseIndexer, WhooshVerseIndexer
from .models import Chapter, Commentary, Translation, ValueKind, Verse
from .navigation import BACK_TARGETS, ChapterScreen, Home, NavigationController, Screen, Settings, VerseScreen
from .repository import InMemoryPreferencesRepository, PreferencesRepository, SqlAlchemyPreferencesRepository
from .session import (
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    ChapterView,
    HomeView,
    ReaderConfig,
    ReaderSession,
    SettingsView,
    VerseItem,
    VerseView,
)
from .state import DEFAULT_FONT_SIZE, ReadingStateStore
from .views import (
    CHAPTER_SEARCH_FIELDS,
    VERSE_SEARCH_FIELDS,
    bookmarked_verses,
    neighbor_verses,
    progress,
    search_filter,
    select_daily_verse,
)

__all__ = [
    "AssetPaths",
    "BACK_TARGETS",
    "CHAPTER_SEARCH_FIELDS",
    "Chapter",
    "ChapterScreen",
    "ChapterView",
    "Commentary",
    "ContentIndex",
    "DEFAULT_FONT_SIZE",
    "FONT_SIZE_MAX",
    "FONT_SIZE_MIN",
    "Home",
    "HomeView",
    "InMemoryPreferencesRepository",
    "LocalAssetLoader",
    "NavigationController",
    "NoopVerseIndexer",
    "PreferencesRepository",
    "ReaderConfig",
    "ReaderSession",
    "ReadingStateStore",
    "Screen",
    "Settings",
    "SettingsView",
    "SqlAlchemyPreferencesRepository",
    "Translation",
    "VERSE_SEARCH_FIELDS",
    "ValueKind",
    "Verse",
    "VerseIndexer",
    "VerseItem",
    "VerseScreen",
    "VerseView",
    "WhooshVerseIndexer",
    "bookmarked_verses",
    "decode_id_set",
    "decode_notes",
    "encode_id_set",
    "encode_notes",
    "neighbor_verses",
    "progress",
    "search_filter",
    "select_daily_verse",
]
