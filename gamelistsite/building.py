from __future__ import annotations
import logging
import shutil
from pathlib import Path
from typing import List, Mapping, Optional

from flask import Flask
from defusedxml import DefusedXmlException
from xml.etree.ElementTree import ParseError

from .gamelist import load_gamelist, normalize_games
from .models import GameRecord, System
from .pages import build_game_page, build_home_page, build_system_page
from .systems import logo_for
from .thumbnails import derive_thumbnail
from .utils import is_readable

logger = logging.getLogger(__name__)

def copy_assets(static_dir: Path, target_root: Path) -> None:
    shutil.copyfile(static_dir / "style.css", target_root / "style.css")
    shutil.copytree(static_dir / "assets", target_root / "assets", dirs_exist_ok=True)

def is_system_directory(path: Path, gamelist_file: str) -> bool:
    return path.is_dir() and is_readable(path / gamelist_file)

def system_for(path: Path, system_names: Mapping[str, str], gamelist_file: str) -> Optional[System]:
    """Build the System for ``path``, or None when it is not one."""
    name = system_names.get(path.name)
    if name is None or not is_system_directory(path, gamelist_file):
        return None
    return System(id=path.name, name=name, logo=logo_for(path.name, path.parent), path=path)

def visible_games(games: List[GameRecord]) -> List[GameRecord]:
    """Non-hidden games ordered by display name (plain code point order)."""
    return sorted((g for g in games if not g.hidden), key=lambda g: g.name)

def process_system_directory(app: Flask, system: System) -> List[GameRecord]:
    cfg = app.config
    logger.info("Processing %s (%s)", system.path, system.name)

    gamelist_path = system.path / cfg["GAMELIST_FILE"]
    try:
        entries = load_gamelist(gamelist_path)
    except (ParseError, DefusedXmlException) as e:
        logger.warning("Cannot parse %s: %s", gamelist_path, e)
        entries = []

    games = normalize_games(entries, system.path)
    for game in games:
        game.thumb = derive_thumbnail(
            system.path, game,
            height=int(cfg["THUMBNAIL_HEIGHT"]),
            placeholder=cfg["PLACEHOLDER_THUMBNAIL"],
        )
        build_game_page(app, system, game)

    listed = visible_games(games)
    build_system_page(app, system, listed)
    logger.info("%s: %d games, %d listed", system.id, len(games), len(listed))
    return listed

def run(app: Flask) -> List[System]:
    """Build the whole site under the app's target root.

    Returns the systems in home page order.
    """
    cfg = app.config
    root = Path(cfg["TARGET_ROOT"])
    copy_assets(Path(cfg["STATIC_DIR"]), root)

    systems: List[System] = []
    for p in sorted(root.iterdir()):
        system = system_for(p, cfg["SYSTEM_NAMES"], cfg["GAMELIST_FILE"])
        if system is None:
            logger.debug("Skipping %s", p)
            continue
        process_system_directory(app, system)
        systems.append(system)

    systems.sort(key=lambda s: s.name)
    build_home_page(app, systems)
    return systems
