from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

@dataclass(frozen=True)
class System:
    id: str
    name: str
    logo: str
    path: Path

@dataclass
class GameRecord:
    name: str
    path: str                       # relative, leading "./" removed
    stem: str                       # sanitized file name stem
    hidden: bool = False
    image: Optional[str] = None
    image_url: Optional[str] = None
    video: Optional[str] = None
    video_url: Optional[str] = None
    thumbnail: Optional[str] = None
    thumb: str = ""                 # resolved thumbnail reference
    fields: Dict[str, str] = field(default_factory=dict)

    @property
    def page(self) -> str:
        return f"{self.stem}.html"
