import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .models import GameRecord
from .utils import is_readable

logger = logging.getLogger(__name__)

THUMBNAIL_HEIGHT = 100
PLACEHOLDER = "../assets/placeholder.svg"

def thumbnail_name(stem: str, height: int = THUMBNAIL_HEIGHT) -> str:
    return f"{stem}-{height}.png"

def make_thumbnail(src: Path, dst: Path, height: int) -> None:
    """Scale ``src`` to ``height`` pixels, keeping the aspect ratio, as PNG."""
    with Image.open(src) as im:
        w, h = im.size
        if w <= 0 or h <= 0:
            raise ValueError(f"empty image: {src}")
        if im.mode not in ("RGB", "RGBA", "L", "LA"):
            im = im.convert("RGBA")
        width = max(1, round(w * height / h))
        thumb = im.resize((width, height), Image.Resampling.LANCZOS)
        thumb.save(dst, "PNG")

def derive_thumbnail(system_dir: Path, game: GameRecord,
                     height: int = THUMBNAIL_HEIGHT, placeholder: str = PLACEHOLDER) -> str:
    """Return the thumbnail reference for ``game``, creating it if needed.

    An existing ``<stem>-<height>.png`` is reused as is, even when the source
    art has changed since. Missing or broken art yields ``placeholder``.
    """
    source = game.thumbnail or game.image
    if not source:
        logger.info("No artwork for %s, using placeholder", game.path)
        return placeholder

    src = system_dir / source
    if not is_readable(src):
        logger.info("Artwork not readable for %s: %s", game.path, src)
        return placeholder

    name = thumbnail_name(game.stem, height)
    dst = system_dir / name
    if dst.exists():
        return name

    try:
        make_thumbnail(src, dst, height)
    except (OSError, ValueError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        logger.warning("Thumbnail failed for %s: %s", game.path, e)
        dst.unlink(missing_ok=True)
        return placeholder
    return name
