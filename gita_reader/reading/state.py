from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Mapping

from .codecs import decode_id_set, decode_notes, encode_id_set, encode_notes
from .repository import PreferencesRepository

logger = logging.getLogger(__name__)

KEY_BOOKMARKS = "bookmarks"
KEY_NOTES = "notes"
KEY_READ = "read"
KEY_FONT_SIZE = "font_size"
DEFAULT_FONT_SIZE = 18


class ReadingStateStore:
    """
    Bookmarks, notes, read-progress and font preference for one reader.

    State is decoded from the repository once at construction and held in
    memory. Every mutation writes the whole affected key back immediately;
    there is no batching and no transaction across keys. The store assumes a
    single caller at a time; callers that share it across threads must
    serialize access themselves.
    """

    def __init__(self, repository: PreferencesRepository, default_font_size: int = DEFAULT_FONT_SIZE):
        self.repo = repository
        self._bookmarks = decode_id_set(self.repo.get_string_set(KEY_BOOKMARKS))
        self._notes: Dict[int, str] = decode_notes(self.repo.get_string(KEY_NOTES, ""))
        self._read = decode_id_set(self.repo.get_string_set(KEY_READ))
        self._font_size = self.repo.get_int(KEY_FONT_SIZE, default_font_size)
        logger.debug(
            "Loaded reading state: %d bookmarks, %d notes, %d read",
            len(self._bookmarks),
            len(self._notes),
            len(self._read),
        )

    # Bookmarks
    @property
    def bookmarks(self) -> FrozenSet[int]:
        return frozenset(self._bookmarks)

    def is_bookmarked(self, verse_id: int) -> bool:
        return verse_id in self._bookmarks

    def toggle_bookmark(self, verse_id: int) -> bool:
        """Flip membership and persist the whole set. Returns the new membership."""
        if verse_id in self._bookmarks:
            self._bookmarks.discard(verse_id)
        else:
            self._bookmarks.add(verse_id)
        self.repo.put_string_set(KEY_BOOKMARKS, encode_id_set(self._bookmarks))
        return verse_id in self._bookmarks

    # Notes
    @property
    def notes(self) -> Mapping[int, str]:
        return dict(self._notes)

    def get_note(self, verse_id: int) -> str:
        return self._notes.get(verse_id, "")

    def set_note(self, verse_id: int, text: str) -> None:
        if not text or not text.strip():
            self._notes.pop(verse_id, None)
        else:
            self._notes[verse_id] = text
        if not self._notes:
            self.repo.remove(KEY_NOTES)
            return
        self.repo.put_string(KEY_NOTES, encode_notes(self._notes))

    # Read progress
    @property
    def read_verses(self) -> FrozenSet[int]:
        return frozenset(self._read)

    @property
    def read_count(self) -> int:
        return len(self._read)

    def mark_read(self, verse_id: int) -> None:
        if verse_id in self._read:
            return
        self._read.add(verse_id)
        self.repo.put_string_set(KEY_READ, encode_id_set(self._read))

    def is_read(self, verse_id: int) -> bool:
        return verse_id in self._read

    # Font size
    @property
    def font_size(self) -> int:
        return self._font_size

    def get_font_size(self) -> int:
        return self._font_size

    def update_font_size(self, size: int) -> None:
        # Stored verbatim; range limits belong to the caller.
        self._font_size = size
        self.repo.put_int(KEY_FONT_SIZE, size)
