from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List

from defusedxml import ElementTree

from .models import GameRecord
from .utils import SanitizeError, clean_relpath, sanitize_stem, url_encode

logger = logging.getLogger(__name__)

RawGameEntry = Dict[str, str]

# compared literally, so kept exactly as written
UNSTRIPPED_FIELDS = {"hidden"}

def load_gamelist(gamelist_path: Path) -> List[RawGameEntry]:
    """Parse a gamelist descriptor into one flat mapping per ``<game>``.

    Child element text becomes the value for its tag; attributes on the
    ``<game>`` element fill in names no child provides. Entries without a
    ``path`` cannot be paged and are dropped.
    """
    tree = ElementTree.parse(str(gamelist_path))
    root = tree.getroot()
    entries: List[RawGameEntry] = []
    if root is None:
        return entries

    for elem in root.findall("game"):
        entry: RawGameEntry = {}
        for child in elem:
            text = child.text or ""
            entry[child.tag] = text if child.tag in UNSTRIPPED_FIELDS else text.strip()
        for key, value in elem.attrib.items():
            entry.setdefault(key, value)
        if not entry.get("path"):
            logger.warning("Skipping game without path in %s", gamelist_path)
            continue
        entries.append(entry)
    return entries

def dedupe_by_path(entries: List[RawGameEntry]) -> List[RawGameEntry]:
    """Keep the last entry for each path, in the order those entries appear."""
    last = {e["path"]: i for i, e in enumerate(entries)}
    return [e for i, e in enumerate(entries) if last[e["path"]] == i]

def _clean_optional(entry: RawGameEntry, key: str):
    value = entry.get(key)
    return clean_relpath(value) if value else None

def normalize_game(entry: RawGameEntry, system_dir: Path) -> GameRecord:
    raw_path = entry["path"]
    name = entry.get("name") or os.path.basename(os.path.normpath(os.path.join(str(system_dir), raw_path)))
    path = clean_relpath(raw_path)
    try:
        stem = sanitize_stem(path)
    except SanitizeError:
        logger.error('Unable to sanitize game path: "%s"', raw_path)
        raise

    image = _clean_optional(entry, "image")
    video = _clean_optional(entry, "video")
    return GameRecord(
        name=name,
        path=path,
        stem=stem,
        hidden=entry.get("hidden") == "true",
        image=image,
        image_url=url_encode(image) if image else None,
        video=video,
        video_url=url_encode(video) if video else None,
        thumbnail=_clean_optional(entry, "thumbnail"),
        fields=dict(entry),
    )

def normalize_games(entries: List[RawGameEntry], system_dir: Path) -> List[GameRecord]:
    return [normalize_game(e, system_dir) for e in dedupe_by_path(entries)]
