import json
from pathlib import Path

_constants_path = Path(__file__).with_name("constants.json")
with _constants_path.open(encoding="utf-8") as f:
    _cfg = json.load(f)

MAX_LAYERS: int = int(_cfg["MAX_LAYERS"])
VIEW_OFFSET: int = int(_cfg["VIEW_OFFSET"])
DEFAULT_SHAPE_SIZE: int = int(_cfg["DEFAULT_SHAPE_SIZE"])
DEFAULT_TEXT_WIDTH: int = int(_cfg["DEFAULT_TEXT_WIDTH"])
DEFAULT_TEXT_HEIGHT: int = int(_cfg["DEFAULT_TEXT_HEIGHT"])
