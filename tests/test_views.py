from datetime import date

from gita_reader.reading import (
    CHAPTER_SEARCH_FIELDS,
    VERSE_SEARCH_FIELDS,
    InMemoryPreferencesRepository,
    ReadingStateStore,
    Verse,
    bookmarked_verses,
    neighbor_verses,
    progress,
    search_filter,
    select_daily_verse,
)


def test_daily_verse_uses_day_of_year_modulo_count(index):
    verses = index.verses
    # 2024-01-03 is day 3 of the year
    assert select_daily_verse(verses, date(2024, 1, 3)) == verses[3 % len(verses)]
    # 2024-12-31 is day 366 of a leap year
    assert select_daily_verse(verses, date(2024, 12, 31)) == verses[366 % len(verses)]


def test_daily_verse_is_stable_within_a_day(index):
    day = date(2025, 6, 1)
    assert select_daily_verse(index.verses, day) == select_daily_verse(list(index.verses), day)


def test_daily_verse_placeholder_for_empty_list():
    verse = select_daily_verse([], date(2025, 1, 1))
    assert verse.id == 0
    assert verse == Verse.placeholder()


def test_progress_values():
    assert progress(0, 10) == 0
    assert progress(10, 10) == 100
    assert progress(3, 10) == 30
    assert progress(1, 3) == 33
    assert progress(2, 3) == 67
    assert progress(1, 8) == 13


def test_progress_undefined_without_total():
    assert progress(0, 0) is None
    assert progress(5, 0) is None


def test_neighbor_verses(index):
    ordered = index.verses_for_chapter(1)
    assert neighbor_verses(ordered, 1) == (None, 2)
    assert neighbor_verses(ordered, 2) == (1, 3)
    assert neighbor_verses(ordered, 3) == (2, None)
    assert neighbor_verses(ordered, 42) == (None, None)
    assert neighbor_verses([], 1) == (None, None)


def test_search_filter_blank_query_is_identity(index):
    assert search_filter("", index.chapters, CHAPTER_SEARCH_FIELDS) == index.chapters
    assert search_filter("   ", index.chapters, CHAPTER_SEARCH_FIELDS) == index.chapters
    assert search_filter(None, index.chapters, CHAPTER_SEARCH_FIELDS) == index.chapters


def test_search_filter_chapters_case_insensitive(index):
    matches = search_filter("krishna", index.chapters, CHAPTER_SEARCH_FIELDS)
    assert [c.chapter_number for c in matches] == [2]
    matches = search_filter("YOGA", index.chapters, CHAPTER_SEARCH_FIELDS)
    assert [c.chapter_number for c in matches] == [1, 2]
    assert search_filter("Chapter 1", index.chapters, CHAPTER_SEARCH_FIELDS) == []


def test_search_filter_verses(index):
    matches = search_filter("sanjaya", index.verses_for_chapter(1), VERSE_SEARCH_FIELDS)
    assert [v.id for v in matches] == [2]
    matches = search_filter("TRANSLIT 3", index.verses_for_chapter(1), VERSE_SEARCH_FIELDS)
    assert [v.id for v in matches] == [3]


def test_bookmarked_verses_in_reading_order(index):
    state = ReadingStateStore(InMemoryPreferencesRepository())
    for verse_id in (5, 2, 777):
        state.toggle_bookmark(verse_id)
    assert [v.id for v in bookmarked_verses(index, state)] == [2, 5]


def test_search_filter_does_not_fold_special_cases():
    verse = Verse(id=1, verse_number=1, chapter_number=1, text="Straße", transliteration="", word_meanings="")
    assert search_filter("ss", [verse], ("text",)) == []
    assert search_filter("STRASSE", [verse], ("text",)) == []
    assert search_filter("STRAßE", [verse], ("text",)) == [verse]
