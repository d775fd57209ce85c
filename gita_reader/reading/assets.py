from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .content import ContentIndex

logger = logging.getLogger(__name__)


@dataclass
class AssetPaths:
    root: Path

    def chapters_path(self) -> Path:
        return self.root / "chapters.json"

    def verses_path(self) -> Path:
        return self.root / "verse.json"

    def translations_path(self) -> Path:
        return self.root / "translation.json"

    def commentaries_path(self) -> Path:
        return self.root / "commentary.json"


class LocalAssetLoader:
    """
    Reads the bundled content files from a directory. A file that cannot be
    opened or decoded yields None so the index can substitute an empty
    collection.
    """

    def __init__(self, asset_paths: AssetPaths):
        self.paths = asset_paths

    def load_collection(self, path: Path) -> Optional[Any]:
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as exc:
            logger.warning("Could not read content file %s: %s", path, exc)
        except ValueError as exc:
            logger.warning("Content file %s is not valid JSON: %s", path, exc)
        return None

    def load_index(self) -> ContentIndex:
        return ContentIndex.load(
            chapters=self.load_collection(self.paths.chapters_path()),
            verses=self.load_collection(self.paths.verses_path()),
            translations=self.load_collection(self.paths.translations_path()),
            commentaries=self.load_collection(self.paths.commentaries_path()),
        )
