import hashlib
import os
from urllib.parse import quote
from pathvalidate import sanitize_filename

# Characters that survive filename sanitizing but break URLs or shells.
UNSAFE_STEM_CHARS = "#%![]+"
REPLACEMENT = "-"

# File names are limited to 255 bytes; leave room for "-<height>.png" or ".html".
MAX_FILENAME_BYTES = 255
STEM_SUFFIX_RESERVE = len("-9999.png")
MAX_STEM_BYTES = MAX_FILENAME_BYTES - STEM_SUFFIX_RESERVE

class SanitizeError(ValueError):
    """A game path could not be turned into a usable file name."""

def _shorten(text: str, raw: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` bytes, keeping its extension.

    A digest of the full ``raw`` value keeps long names that share a
    prefix apart.
    """
    if len(text.encode("utf-8")) <= limit:
        return text
    base, ext = os.path.splitext(text)
    if len(ext.encode("utf-8")) > 16:
        base, ext = text, ""
    digest = hashlib.sha1(str(raw).encode("utf-8")).hexdigest()[:8]
    room = limit - len(ext.encode("utf-8")) - len(digest) - 1
    base = base.encode("utf-8")[:room].decode("utf-8", "ignore")
    return f"{base}{REPLACEMENT}{digest}{ext}"

def sanitize_stem(raw: str) -> str:
    """Turn a game name or relative path into a flat, URL-safe file stem.

    Path separators become ``-`` so that ``sub/dir/rom.zip`` maps to
    ``sub-dir-rom.zip``. Stems longer than ``MAX_STEM_BYTES`` are shortened
    and tagged with a digest of ``raw``.
    """
    text = str(raw).replace("/", REPLACEMENT).replace("\\", REPLACEMENT)
    text = _shorten(text, raw, MAX_STEM_BYTES)
    try:
        stem = sanitize_filename(text, replacement_text=REPLACEMENT, max_len=MAX_STEM_BYTES)
    except ValueError as e:
        raise SanitizeError(f"cannot sanitize {raw!r}: {e}") from e
    for ch in UNSAFE_STEM_CHARS:
        stem = stem.replace(ch, REPLACEMENT)
    if not stem.strip(REPLACEMENT + " ."):
        raise SanitizeError(f"nothing usable left after sanitizing {raw!r}")
    return stem

def clean_relpath(value: str) -> str:
    return value[2:] if value.startswith("./") else value

def url_encode(relpath: str) -> str:
    return quote(relpath, safe="/")

def is_readable(path) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)
