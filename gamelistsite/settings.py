import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping

logger = logging.getLogger(__name__)

def load_settings(settings_file: Path, system_names: Mapping[str, str]) -> Dict:
    """Read the optional per-catalog settings file.

    ``system_names`` entries in the file extend or override the built-in
    lookup table. A missing file is normal; an unreadable one is logged and
    ignored.
    """
    names = dict(system_names)
    try:
        if settings_file.exists():
            data = json.loads(settings_file.read_text("utf-8"))
            extra = data.get("system_names", {}) if isinstance(data, dict) else {}
            if isinstance(extra, dict):
                names.update({str(k): str(v) for k, v in extra.items()})
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", settings_file, e)
    return {"system_names": MappingProxyType(names)}
