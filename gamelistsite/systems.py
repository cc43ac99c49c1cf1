from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

# Directory names (EmulationStation system ids) recognised as systems.
SYSTEM_NAMES = MappingProxyType({
    # Atari
    "atari2600": "Atari 2600",
    "atari5200": "Atari 5200",
    "atari7800": "Atari 7800",
    "atari800": "Atari 800",
    "atarijaguar": "Atari Jaguar",
    "atarilynx": "Atari Lynx",
    "atarist": "Atari ST",
    # Nintendo
    "nes": "Nintendo Entertainment System",
    "fds": "Famicom Disk System",
    "snes": "Super Nintendo",
    "n64": "Nintendo 64",
    "gamecube": "Nintendo GameCube",
    "wii": "Nintendo Wii",
    "gb": "Game Boy",
    "gbc": "Game Boy Color",
    "gba": "Game Boy Advance",
    "nds": "Nintendo DS",
    "virtualboy": "Virtual Boy",
    # Sega
    "sg-1000": "Sega SG-1000",
    "mastersystem": "Sega Master System",
    "megadrive": "Sega Mega Drive",
    "genesis": "Sega Genesis",
    "segacd": "Sega CD",
    "sega32x": "Sega 32X",
    "saturn": "Sega Saturn",
    "dreamcast": "Sega Dreamcast",
    "gamegear": "Sega Game Gear",
    # Sony
    "psx": "Sony PlayStation",
    "ps2": "Sony PlayStation 2",
    "psp": "Sony PlayStation Portable",
    # NEC
    "pcengine": "PC Engine",
    "pcenginecd": "PC Engine CD",
    "tg16": "TurboGrafx-16",
    # SNK
    "neogeo": "Neo Geo",
    "ngp": "Neo Geo Pocket",
    "ngpc": "Neo Geo Pocket Color",
    # Arcade
    "arcade": "Arcade",
    "mame": "MAME",
    "fbneo": "FinalBurn Neo",
    "cps1": "Capcom Play System",
    "cps2": "Capcom Play System II",
    "cps3": "Capcom Play System III",
    # Computers
    "amiga": "Commodore Amiga",
    "c64": "Commodore 64",
    "amstradcpc": "Amstrad CPC",
    "msx": "MSX",
    "zxspectrum": "ZX Spectrum",
    "dos": "DOS",
    "scummvm": "ScummVM",
    # Other
    "3do": "3DO",
    "coleco": "ColecoVision",
    "intellivision": "Intellivision",
    "vectrex": "Vectrex",
    "wonderswan": "WonderSwan",
    "wonderswancolor": "WonderSwan Color",
    "ports": "Ports",
})

DEFAULT_LOGO = "assets/logo.svg"

def logo_for(system_id: str, target_root: Path) -> str:
    """Logo reference relative to the root; user logos go in assets/logos/."""
    logo = f"assets/logos/{system_id}.svg"
    return logo if (target_root / logo).is_file() else DEFAULT_LOGO
