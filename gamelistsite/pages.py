from __future__ import annotations
from pathlib import Path
from typing import List
from flask import Flask, render_template_string

from .models import GameRecord, System
from .templates import HOME_HTML, SYSTEM_HTML, GAME_HTML

# descriptor fields shown on a game page, in display order
GAME_FACTS = (
    ("developer", "Developer"),
    ("publisher", "Publisher"),
    ("releasedate", "Released"),
    ("genre", "Genre"),
    ("players", "Players"),
    ("rating", "Rating"),
)

def write_page(app: Flask, target: Path, template: str, **context) -> None:
    with app.app_context():
        html = render_template_string(template, app_title=app.config["APP_TITLE"], **context)
    target.write_text(html, encoding="utf-8")

def build_home_page(app: Flask, systems: List[System]) -> Path:
    target = Path(app.config["TARGET_ROOT"]) / "index.html"
    write_page(app, target, HOME_HTML, systems=systems)
    return target

def build_system_page(app: Flask, system: System, games: List[GameRecord]) -> Path:
    target = system.path / "index.html"
    write_page(app, target, SYSTEM_HTML, system=system, games=games)
    return target

def build_game_page(app: Flask, system: System, game: GameRecord) -> Path:
    target = system.path / game.page
    write_page(app, target, GAME_HTML, system=system, game=game, facts=GAME_FACTS)
    return target
