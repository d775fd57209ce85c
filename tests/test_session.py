import json
from datetime import date

from gita_reader.reading import (
    ChapterView,
    ContentIndex,
    HomeView,
    InMemoryPreferencesRepository,
    ReaderConfig,
    ReaderSession,
    ReadingStateStore,
    SettingsView,
    VerseView,
    WhooshVerseIndexer,
)


def _session(index, today=date(2025, 1, 2)):
    state = ReadingStateStore(InMemoryPreferencesRepository())
    return ReaderSession(index, state, today=today)


def test_home_view_reports_daily_verse_and_progress(index):
    session = _session(index)
    view = session.current_view()
    assert isinstance(view, HomeView)
    assert view.daily_verse == index.verses[2 % 5]
    assert view.total_count == 5
    assert view.progress_percent == 0
    session.set_query("krishna")
    assert [c.chapter_number for c in session.current_view().chapters] == [2]


def test_progress_hidden_without_content():
    session = _session(ContentIndex())
    view = session.current_view()
    assert view.progress_percent is None
    assert view.daily_verse.id == 0


def test_views_follow_navigation(index):
    session = _session(index)
    session.navigation.select_chapter(1)
    chapter_view = session.current_view()
    assert isinstance(chapter_view, ChapterView)
    assert [item.verse.id for item in chapter_view.verses] == [1, 2, 3]

    session.navigation.select_verse(1)
    session.state.toggle_bookmark(1)
    session.state.set_note(1, "field of duty")
    verse_view = session.current_view()
    assert isinstance(verse_view, VerseView)
    assert (verse_view.previous_id, verse_view.next_id) == (None, 2)
    assert len(verse_view.translations) == 2
    assert verse_view.bookmarked and verse_view.note == "field of duty"

    session.navigation.back()
    items = {item.verse.id: item for item in session.current_view().verses}
    assert items[1].read and items[1].bookmarked and items[1].has_note
    assert not items[2].read and not items[2].has_note

    session.navigation.back()
    assert session.current_view().progress_percent == 20


def test_chapter_view_filters_verses_by_query(index):
    session = _session(index)
    session.navigation.select_chapter(1)
    session.set_query("army")
    assert [item.verse.id for item in session.current_view().verses] == [2, 3]


def test_font_size_is_clamped_by_the_session(index):
    session = _session(index)
    session.navigation.open_settings()
    assert session.change_font_size(40) == 30
    assert session.change_font_size(5) == 12
    assert session.change_font_size(21) == 21
    view = session.current_view()
    assert isinstance(view, SettingsView)
    assert view.font_size == 21


def test_share_text(index):
    session = _session(index)
    assert session.share_text(5) == "The Blessed Lord said"
    assert session.share_text(404) == ""


def test_from_config_wires_assets_database_and_search(tmp_path, raw_content):
    asset_root = tmp_path / "assets"
    asset_root.mkdir()
    for name, key in (
        ("chapters.json", "chapters"),
        ("verse.json", "verses"),
        ("translation.json", "translations"),
        ("commentary.json", "commentaries"),
    ):
        (asset_root / name).write_text(json.dumps(raw_content[key]), encoding="utf-8")
    config = ReaderConfig(
        asset_root=str(asset_root),
        database_url=f"sqlite+pysqlite:///{tmp_path / 'data' / 'reader.db'}",
        whoosh_index_dir=str(tmp_path / "whoosh"),
    )

    session = ReaderSession.from_config(config)
    assert session.index.verse_count == 5
    session.state.toggle_bookmark(4)
    hits = session.search_verses("kurukshetra")
    assert [hit["verse_id"] for hit in hits] == [1]

    reopened = ReaderSession.from_config(config)
    assert reopened.state.is_bookmarked(4)


def test_reader_config_from_env(monkeypatch):
    monkeypatch.setenv("ASSET_ROOT", "/srv/assets")
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    monkeypatch.delenv("WHOOSH_DIR", raising=False)
    config = ReaderConfig.from_env()
    assert config.asset_root == "/srv/assets"
    assert config.database_url == "sqlite+pysqlite:///:memory:"
    assert config.whoosh_index_dir is None
    assert config.default_font_size == 18


def test_whoosh_indexer_reindex_is_idempotent(tmp_path, index):
    indexer = WhooshVerseIndexer(tmp_path / "whoosh")
    translations = [t for v in index.verses for t in index.translations_for_verse(v.id)]
    indexer.index_verses(index.verses, translations)
    indexer.index_verses(index.verses, translations)
    hits = indexer.search("sanjaya", limit=10)
    assert sorted(hit["verse_id"] for hit in hits) == [2, 4]
    assert indexer.search("   ") == []


def test_daily_verse_follows_the_date_on_a_long_lived_session(index):
    session = _session(index, today=date(2025, 1, 2))
    assert session.current_view().daily_verse == index.verses[2]
    session.today = date(2025, 1, 3)
    assert session.current_view().daily_verse == index.verses[3]
    assert session.open_daily_verse().verse_id == index.verses[3].id


def test_chapter_view_without_chapter_record(raw_content):
    index = ContentIndex.load(chapters=None, verses=raw_content["verses"])
    session = _session(index, today=date(2025, 1, 1))
    session.open_daily_verse()
    session.navigation.back()
    view = session.current_view()
    assert isinstance(view, ChapterView)
    assert view.chapter is None
    assert [item.verse.id for item in view.verses] == [1, 2, 3]
