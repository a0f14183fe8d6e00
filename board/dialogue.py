"""Pending-shape dialogue state.

When the assistant has asked for a missing dimension, the widget holds one of
the ``Awaiting*`` states until the user answers with usable numbers. The
answer is parsed locally; no model call is involved.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from board.canvas import Color, LayerType


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class AwaitingRadius:
    color: Color


@dataclass(frozen=True)
class AwaitingSize:
    color: Color


@dataclass(frozen=True)
class AwaitingWidthHeight:
    color: Color
    shape_type: str = "rectangle"


DialogueState = Union[Idle, AwaitingRadius, AwaitingSize, AwaitingWidthHeight]

IDLE = Idle()


@dataclass(frozen=True)
class Resolution:
    """Outcome of answering a dimension prompt.

    Exactly one of ``layer_type`` (a shape to insert) or ``reprompt`` is set.
    """

    layer_type: Optional[LayerType] = None
    width: int = 0
    height: int = 0
    color: Optional[Color] = None
    confirmation: str = ""
    reprompt: str = ""


def extract_numbers(text: str) -> List[int]:
    """Return every run of decimal digits in ``text`` as an int."""
    return [int(n) for n in re.findall(r"\d+", text)]


def prompt_for(shape_type: str, color: Color) -> Tuple[DialogueState, str]:
    """
    Map a ``needsDimensions`` shape type to its awaiting state and question.

    Raises ``ValueError`` for shape types the assistant cannot size.
    """
    if shape_type == "circle":
        return (
            AwaitingRadius(color),
            "What radius would you like for the circle? (e.g., '50')",
        )
    if shape_type == "square":
        return (
            AwaitingSize(color),
            "What size would you like for the square? (e.g., '100')",
        )
    if shape_type == "rectangle":
        return (
            AwaitingWidthHeight(color, "rectangle"),
            "What width and height would you like for the rectangle? (e.g., '200 150')",
        )
    raise ValueError(f"Cannot ask for dimensions of shape {shape_type!r}")


def resolve_dimensions(state: DialogueState, text: str) -> Resolution:
    numbers = extract_numbers(text)

    if isinstance(state, AwaitingRadius):
        if not numbers or numbers[0] <= 0:
            return Resolution(reprompt="Please provide a valid radius (a positive number).")
        radius = numbers[0]
        return Resolution(
            layer_type=LayerType.ELLIPSE,
            width=radius * 2,
            height=radius * 2,
            color=state.color,
            confirmation=f"Great! I've created a circle with radius {radius}px.",
        )

    if isinstance(state, AwaitingSize):
        if not numbers:
            return Resolution(reprompt="Please provide a size as a number (e.g., '100').")
        size = numbers[0]
        if size <= 0:
            return Resolution(reprompt="Please provide a valid size (a positive number).")
        return Resolution(
            layer_type=LayerType.RECTANGLE,
            width=size,
            height=size,
            color=state.color,
            confirmation=f"Perfect! I've created a square with size {size}px.",
        )

    if isinstance(state, AwaitingWidthHeight):
        if len(numbers) < 2:
            return Resolution(
                reprompt="Please provide both width and height as two numbers (e.g., '200 150')."
            )
        width, height = numbers[0], numbers[1]
        if width <= 0 or height <= 0:
            return Resolution(reprompt="Please provide valid dimensions (two positive numbers).")
        return Resolution(
            layer_type=LayerType.RECTANGLE,
            width=width,
            height=height,
            color=state.color,
            confirmation=(
                f"Perfect! I've created a {state.shape_type} with width {width}px "
                f"and height {height}px."
            ),
        )

    raise ValueError(f"No dimensions are pending in state {state!r}")
