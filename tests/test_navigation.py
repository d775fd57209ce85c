from gita_reader.reading import (
    ChapterScreen,
    ContentIndex,
    Home,
    InMemoryPreferencesRepository,
    NavigationController,
    ReadingStateStore,
    Settings,
    Verse,
    VerseScreen,
)


def _controller(index):
    state = ReadingStateStore(InMemoryPreferencesRepository())
    return NavigationController(index, state), state


def test_starts_on_home(index):
    nav, _ = _controller(index)
    assert nav.screen == Home()


def test_chapter_then_verse_marks_read(index):
    nav, state = _controller(index)
    assert nav.select_chapter(1) == ChapterScreen(1)
    assert not state.is_read(2)
    assert nav.select_verse(2) == VerseScreen(2, 1)
    assert state.is_read(2)


def test_unresolved_references_are_no_ops(index):
    nav, state = _controller(index)
    assert nav.select_chapter(42) == Home()
    nav.select_chapter(1)
    assert nav.select_verse(999) == ChapterScreen(1)
    # verse 4 exists but belongs to chapter 2
    assert nav.select_verse(4) == ChapterScreen(1)
    assert state.read_count == 0


def test_swipe_moves_between_neighbors(index):
    nav, state = _controller(index)
    nav.select_chapter(1)
    nav.select_verse(1)
    assert nav.swipe_previous() == VerseScreen(1, 1)
    assert nav.swipe_next() == VerseScreen(2, 1)
    assert nav.swipe_next() == VerseScreen(3, 1)
    assert nav.swipe_next() == VerseScreen(3, 1)
    assert nav.swipe_previous() == VerseScreen(2, 1)
    assert state.read_verses == frozenset({1})


def test_back_targets_are_fixed(index):
    nav, _ = _controller(index)
    nav.select_chapter(2)
    nav.select_verse(5)
    nav.swipe_previous()
    assert nav.back() == ChapterScreen(2)
    assert nav.back() == Home()
    assert nav.back() == Home()


def test_back_from_daily_verse_goes_to_its_chapter(index):
    nav, state = _controller(index)
    daily = index.verse_by_id(3)
    assert nav.open_daily_verse(daily) == VerseScreen(3, 1)
    assert not state.is_read(3)
    assert nav.back() == ChapterScreen(1)
    assert nav.back() == Home()


def test_placeholder_daily_verse_does_not_navigate():
    nav, _ = _controller(ContentIndex())
    assert nav.open_daily_verse(Verse.placeholder()) == Home()


def test_settings_round_trip(index):
    nav, _ = _controller(index)
    assert nav.open_settings() == Settings()
    assert nav.select_chapter(1) == Settings()
    assert nav.back() == Home()


def test_transitions_from_wrong_screen_are_ignored(index):
    nav, _ = _controller(index)
    assert nav.select_verse(1) == Home()
    assert nav.swipe_next() == Home()
    nav.select_chapter(1)
    assert nav.open_settings() == ChapterScreen(1)
    assert nav.select_chapter(2) == ChapterScreen(1)
