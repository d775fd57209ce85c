"""
Serialization of personal reading state into preference values.

Two encodings are in use and must stay byte-compatible with data written by
earlier releases of the reader:

* id sets (bookmarks, read verses) are stored as a set of decimal strings;
* notes are stored as one string, ``"<id>::<text>|<id>::<text>"``.

Decoding is total: tokens that do not parse are dropped, never raised.

The note grammar cannot represent a note whose text contains ``"|"``; such a
note comes back split into fragments. This is kept as-is so existing stored
data decodes the same way it always has.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Mapping, Optional, Set

logger = logging.getLogger(__name__)

NOTE_ENTRY_DELIMITER = "|"
NOTE_KEY_SEPARATOR = "::"

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_int_token(token: Optional[str]) -> Optional[int]:
    """
    Strict integer parse: optional sign followed by ASCII digits only. Any
    magnitude is accepted so every id that can be written reads back.
    Returns None for anything else (blank, whitespace, underscores, decimals).
    """
    if token is None or not _INT_TOKEN.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def encode_id_set(ids: Iterable[int]) -> Set[str]:
    return {str(i) for i in ids}


def decode_id_set(tokens: Optional[Iterable[Optional[str]]]) -> Set[int]:
    if tokens is None:
        return set()
    decoded: Set[int] = set()
    for token in tokens:
        value = parse_int_token(token)
        if value is None:
            logger.debug("Dropping unparsable id token %r", token)
            continue
        decoded.add(value)
    return decoded


def encode_notes(notes: Mapping[int, str]) -> str:
    return NOTE_ENTRY_DELIMITER.join(f"{key}{NOTE_KEY_SEPARATOR}{value}" for key, value in notes.items())


def decode_notes(raw: Optional[str]) -> Dict[int, str]:
    notes: Dict[int, str] = {}
    if not raw:
        return notes
    for piece in raw.split(NOTE_ENTRY_DELIMITER):
        if NOTE_KEY_SEPARATOR not in piece:
            continue
        key_token, text = piece.split(NOTE_KEY_SEPARATOR, 1)
        key = parse_int_token(key_token)
        if key is None:
            logger.debug("Dropping note entry with unparsable id %r", key_token)
            continue
        # Later entries win, as with a map built from a list of pairs.
        notes[key] = text
    return notes
