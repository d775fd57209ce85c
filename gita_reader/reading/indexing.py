from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Protocol

from whoosh import index
from whoosh.fields import ID, NUMERIC, TEXT, Schema
from whoosh.qparser import MultifieldParser
from whoosh.query import Every

from .models import Translation, Verse


class VerseIndexer(Protocol):
    def index_verses(self, verses: Iterable[Verse], translations: Iterable[Translation]) -> None:
        ...

    def search(self, query_str: str, limit: int = 10) -> List[Dict]:
        ...


class NoopVerseIndexer:
    """
    Default indexer stub. Keeps the session wired without a Whoosh index;
    full-text search returns nothing.
    """

    def index_verses(self, verses: Iterable[Verse], translations: Iterable[Translation]) -> None:
        return None

    def search(self, query_str: str, limit: int = 10) -> List[Dict]:
        return []


class WhooshVerseIndexer:
    """
    File-system backed Whoosh index over verse text, transliteration and the
    prose of every translation attached to the verse. Re-indexing clears the
    index first.
    """

    def __init__(self, index_dir: Path):
        self.index_dir = index_dir
        self.index_dir.mkdir(parents=True, exist_ok=True)
        self.schema = Schema(
            verse_id=ID(stored=True, unique=True),
            chapter_number=NUMERIC(stored=True),
            verse_number=NUMERIC(stored=True, sortable=True),
            text=TEXT(stored=True),
            transliteration=TEXT,
            translations=TEXT,
        )
        if index.exists_in(self.index_dir):
            self.ix = index.open_dir(self.index_dir)
        else:
            self.ix = index.create_in(self.index_dir, self.schema)

    def index_verses(self, verses: Iterable[Verse], translations: Iterable[Translation]) -> None:
        prose: Dict[int, List[str]] = {}
        for translation in translations:
            prose.setdefault(translation.verse_id, []).append(translation.description or "")
        writer = self.ix.writer()
        writer.delete_by_query(Every())
        for verse in verses:
            writer.add_document(
                verse_id=str(verse.id),
                chapter_number=verse.chapter_number,
                verse_number=verse.verse_number,
                text=verse.text or "",
                transliteration=verse.transliteration or "",
                translations="\n".join(prose.get(verse.id, [])),
            )
        writer.commit()

    def search(self, query_str: str, limit: int = 10) -> List[Dict]:
        """
        Return a list of plain dicts so callers are safe after the searcher closes.
        """
        if not query_str or not query_str.strip():
            return []
        qp = MultifieldParser(["text", "transliteration", "translations"], schema=self.schema)
        q = qp.parse(query_str)
        with self.ix.searcher() as searcher:
            results = searcher.search(q, limit=limit)
            hits = []
            for hit in results:
                fields = hit.fields()
                hits.append(
                    {
                        "verse_id": int(fields.get("verse_id")),
                        "chapter_number": fields.get("chapter_number"),
                        "verse_number": fields.get("verse_number"),
                        "text": fields.get("text"),
                    }
                )
            return hits
