"""Layer model and the shared board store the chat widget writes to.

The real-time collaborative document store is an external collaborator; this
module models the part of it the widget relies on: an ordered list of layer
ids, a mapping of id to layer, per-user selection presence and a single
atomic insert that respects the board's layer cap.
"""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional

from constants import MAX_LAYERS

logger = logging.getLogger(__name__)


class LayerType(IntEnum):
    # values match the board's layer discriminants; 2 is the freehand path
    RECTANGLE = 0
    ELLIPSE = 1
    TEXT = 3


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel!r}")

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Camera:
    x: float = 0
    y: float = 0


@dataclass
class Layer:
    type: LayerType
    x: float
    y: float
    width: float
    height: float
    fill: Color
    value: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "type": int(self.type),
            "x": self.x,
            "y": self.y,
            "height": self.height,
            "width": self.width,
            "fill": self.fill.to_dict(),
        }
        if self.value:
            data["value"] = self.value
        return data


class LayerLimitReached(Exception):
    """Raised when an insert is attempted on a board already at its cap."""
    pass


@dataclass
class LayerStore:
    """In-process stand-in for the shared board storage."""

    max_layers: int = MAX_LAYERS
    layer_ids: List[str] = field(default_factory=list)
    layers: Dict[str, Layer] = field(default_factory=dict)
    selections: Dict[str, List[str]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.layers)

    def __bool__(self) -> bool:
        # an empty board is still a board
        return True

    def insert_layer(
        self,
        layer_type: LayerType,
        position: Point,
        width: float,
        height: float,
        default_fill: Color,
        color: Optional[Color] = None,
        text_value: Optional[str] = None,
        user_id: str = "local",
    ) -> Layer:
        """
        Append one layer and select it for ``user_id``.

        ``color`` falls back to ``default_fill``. Raises
        :class:`LayerLimitReached` without touching the store when the board
        already holds ``max_layers`` layers.
        """
        with self._lock:
            if len(self.layers) >= self.max_layers:
                logger.info("insert_layer refused: board holds %d layers", len(self.layers))
                raise LayerLimitReached(f"Board already has {self.max_layers} layers")

            layer_id = uuid.uuid4().hex
            layer = Layer(
                type=layer_type,
                x=position.x,
                y=position.y,
                width=width,
                height=height,
                fill=color or default_fill,
                value=text_value or None,
            )
            self.layer_ids.append(layer_id)
            self.layers[layer_id] = layer
            self.selections[user_id] = [layer_id]
            logger.debug("insert_layer: %s %s", layer_id, layer)
            return layer
