"""
Example: load the bundled content, open the reading state and print the home
screen (daily verse, progress, chapters), optionally marking a verse read.

Usage:
    python3 reader_demo.py --assets ./assets --db ./data/gita_reader.db --query karma
"""

import argparse
import logging
from pathlib import Path

from gita_reader.reading import ReaderConfig, ReaderSession


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--assets", default=Path("./assets"), type=Path, help="Directory holding the content JSON files")
    parser.add_argument("--db", default=Path("./data/gita_reader.db"), type=Path, help="SQLite DB path for reading state")
    parser.add_argument("--whoosh-dir", default=None, type=Path, help="Build a Whoosh index here and enable --search")
    parser.add_argument("--query", default="", help="Filter chapters by name or summary")
    parser.add_argument("--search", default=None, help="Full-text verse search (needs --whoosh-dir)")
    parser.add_argument("--read", default=None, type=int, help="Open this verse id from its chapter and mark it read")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    setup_logging(args.log_level)

    config = ReaderConfig(
        asset_root=str(args.assets),
        database_url=f"sqlite+pysqlite:///{args.db}",
        whoosh_index_dir=str(args.whoosh_dir) if args.whoosh_dir else None,
    )
    session = ReaderSession.from_config(config)

    if args.read is not None:
        verse = session.index.verse_by_id(args.read)
        if verse is None:
            print(f"Verse {args.read} not found")
        else:
            session.navigation.select_chapter(verse.chapter_number)
            session.navigation.select_verse(verse.id)
            session.navigation.back()
            session.navigation.back()

    session.set_query(args.query)
    home = session.current_view()
    daily = home.daily_verse
    print(f"Verse of the day ({daily.chapter_number}.{daily.verse_number}): {daily.text}")
    if home.progress_percent is not None:
        print(f"{home.read_count} of {home.total_count} verses read ({home.progress_percent}%)")
    for chapter in home.chapters:
        print(f"  {chapter.chapter_number:>2}. {chapter.name_transliterated} - {chapter.name_translation}")

    if args.search:
        for hit in session.search_verses(args.search):
            print(f"  [{hit['chapter_number']}.{hit['verse_number']}] {hit['text']}")


if __name__ == "__main__":
    main()
