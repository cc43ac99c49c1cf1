import os
from pathlib import Path
from types import MappingProxyType
from flask import Flask

from .settings import load_settings
from .systems import SYSTEM_NAMES
from .thumbnails import PLACEHOLDER, THUMBNAIL_HEIGHT

STATIC_DIR = Path(__file__).resolve().parent / "static"

def ensure_root(target_root: str) -> None:
    if not os.path.isdir(target_root):
        raise SystemExit(f"Target root does not exist: {target_root}")

def create_app(target_root: str, system_names=None) -> Flask:
    """Build the Flask app that carries the build configuration.

    Nothing is served; the app only provides config and the Jinja
    environment used to render the static pages.
    """
    app = Flask(__name__)
    app.config["TARGET_ROOT"] = target_root
    app.config["APP_TITLE"] = "Game Library"
    app.config["GAMELIST_FILE"] = "gamelist.xml"
    app.config["SETTINGS_FILE"] = os.path.join(target_root, "_gamelistsite.json")
    app.config["THUMBNAIL_HEIGHT"] = THUMBNAIL_HEIGHT
    app.config["PLACEHOLDER_THUMBNAIL"] = PLACEHOLDER
    app.config["STATIC_DIR"] = str(STATIC_DIR)

    if system_names is None:
        settings = load_settings(Path(app.config["SETTINGS_FILE"]), SYSTEM_NAMES)
        system_names = settings["system_names"]
    app.config["SYSTEM_NAMES"] = MappingProxyType(dict(system_names))
    return app
