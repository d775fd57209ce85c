from __future__ import annotations

import math
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from .content import ContentIndex
from .models import Verse
from .state import ReadingStateStore

T = TypeVar("T")

CHAPTER_SEARCH_FIELDS = ("name_transliterated", "name", "chapter_summary")
VERSE_SEARCH_FIELDS = ("text", "transliteration")


def select_daily_verse(verses: Sequence[Verse], today: Optional[date] = None) -> Verse:
    """
    Pick the verse for a calendar day: day-of-year (1-based) modulo the
    number of verses. Returns the placeholder verse when there are none.
    """
    if not verses:
        return Verse.placeholder()
    today = today or date.today()
    return verses[today.timetuple().tm_yday % len(verses)]


def progress(read_count: int, total_count: int) -> Optional[int]:
    """
    Percentage of verses read, rounded half up. None when there is nothing
    to measure against; callers hide the progress display in that case.
    """
    if total_count <= 0:
        return None
    return int(math.floor(read_count / total_count * 100 + 0.5))


def neighbor_verses(ordered_verses: Sequence[Verse], current_id: int) -> Tuple[Optional[int], Optional[int]]:
    for idx, verse in enumerate(ordered_verses):
        if verse.id == current_id:
            prev_id = ordered_verses[idx - 1].id if idx > 0 else None
            next_id = ordered_verses[idx + 1].id if idx + 1 < len(ordered_verses) else None
            return prev_id, next_id
    return None, None


def search_filter(query: Optional[str], items: Iterable[T], fields: Sequence[str]) -> List[T]:
    """
    Case-insensitive substring match of ``query`` against the named string
    attributes of each item. A blank query returns every item.
    """
    items = list(items)
    if not query or not query.strip():
        return items
    needle = query.lower()
    matched = []
    for item in items:
        for field_name in fields:
            value = getattr(item, field_name, None)
            if isinstance(value, str) and needle in value.lower():
                matched.append(item)
                break
    return matched


def bookmarked_verses(index: ContentIndex, state: ReadingStateStore) -> List[Verse]:
    verses = [v for v in (index.verse_by_id(i) for i in state.bookmarks) if v is not None]
    return sorted(verses, key=lambda v: (v.chapter_number, v.verse_number))
