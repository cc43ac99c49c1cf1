#!/usr/bin/env python3
"""
Smoke test for the static catalog build.

Checks:
- asset copy + home page ordering
- duplicate paths collapse to the last entry
- hidden games: page written, not listed
- thumbnails derived once, placeholder for missing art
- second run: identical HTML, cached thumbnails untouched
"""
import shutil, sys, tempfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from gamelistsite import create_app, ensure_root
from gamelistsite.building import run


def _touch(p: Path, data: bytes = b""):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data or b"stub")


def _png(w=600, h=800):
    from PIL import Image
    import io
    buf = io.BytesIO()
    Image.new("RGB", (w, h), (12, 34, 56)).save(buf, format="PNG")
    return buf.getvalue()


SNES_GAMELIST = """<?xml version="1.0"?>
<gameList>
  <game>
    <path>./rom.zip</path>
    <image>./images/rom.png</image>
  </game>
  <game>
    <path>./Zelda #3 [!].sfc</path>
    <name>Zelda</name>
    <image>./images/zelda.png</image>
    <video>./videos/Zelda #3.mp4</video>
  </game>
  <game>
    <path>./debug.sfc</path>
    <name>Debug Menu</name>
    <hidden>true</hidden>
  </game>
  <game>
    <path>./rom.zip</path>
    <name>Real Title</name>
    <image>./images/rom.png</image>
  </game>
</gameList>
"""


def _html_snapshot(root: Path):
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*.html"))}


def test_full_build():
    tmp = Path(tempfile.mkdtemp(prefix="gamelistsite_test_"))
    try:
        root = tmp / "roms"
        root.mkdir()

        snes = root / "snes"
        _touch(snes / "gamelist.xml", SNES_GAMELIST.encode("utf-8"))
        _touch(snes / "images" / "rom.png", _png(600, 800))
        _touch(snes / "images" / "zelda.png", _png(800, 400))

        atari = root / "atari2600"
        _touch(atari / "gamelist.xml", b"<gameList><game><path>./pitfall.a26</path></game></gameList>")

        # valid gamelist, unknown system id
        _touch(root / "foo" / "gamelist.xml", b"<gameList><game><path>./x.zip</path></game></gameList>")

        ensure_root(str(root))
        app = create_app(str(root))
        systems = run(app)

        # Home page order follows display names
        assert [s.id for s in systems] == ["atari2600", "snes"], systems
        assert (root / "style.css").is_file()
        assert (root / "assets" / "placeholder.svg").is_file()
        assert not (root / "foo" / "index.html").exists(), "unknown system was built"

        # Duplicates collapse; hidden page still written
        pages = sorted(p.name for p in snes.glob("*.html"))
        assert pages == ["Zelda -3 ---.sfc.html", "debug.sfc.html", "index.html", "rom.zip.html"], pages
        listing = (snes / "index.html").read_text(encoding="utf-8")
        assert "Real Title" in listing and "Zelda" in listing
        assert "Debug Menu" not in listing
        assert listing.index("Real Title") < listing.index("Zelda")

        # Thumbnails
        assert (snes / "rom.zip-100.png").is_file()
        assert (snes / "Zelda -3 ---.sfc-100.png").is_file()
        assert not list(atari.glob("*.png")), "placeholder game produced a thumbnail"
        assert "../assets/placeholder.svg" in (atari / "index.html").read_text(encoding="utf-8")
        zelda = (snes / "Zelda -3 ---.sfc.html").read_text(encoding="utf-8")
        assert "videos/Zelda%20%233.mp4" in zelda

        # Second run: same HTML, cached thumbnail untouched
        first = _html_snapshot(root)
        cached = snes / "rom.zip-100.png"
        cached.write_bytes(b"cached")
        run(create_app(str(root)))
        assert _html_snapshot(root) == first, "HTML changed between runs"
        assert cached.read_bytes() == b"cached", "thumbnail was re-derived"

        print("[OK] Systems:", [s.name for s in systems])
        print("[OK] SNES pages:", pages)
        print("[OK] Re-run produced identical HTML and kept cached thumbnails.")
    finally:
        shutil.rmtree(tmp, ignore_errors=True)


if __name__ == "__main__":
    test_full_build()
