"""Prompt template for the shape assistant.

The model is asked for one JSON object describing either a shape, a text
element or a request for the missing dimensions. Colours are resolved by the
model through the fixed name table below.
"""

# name -> (r, g, b)
COLOR_TABLE = {
    "red": (255, 0, 0),
    "blue": (0, 0, 255),
    "green": (0, 255, 0),
    "yellow": (255, 255, 0),
    "purple": (128, 0, 128),
    "orange": (255, 165, 0),
    "pink": (255, 192, 203),
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
}


def _color_examples() -> str:
    lines = []
    seen = set()
    for name, (r, g, b) in COLOR_TABLE.items():
        if (r, g, b) in seen:
            continue
        seen.add((r, g, b))
        aliases = [n for n, rgb in COLOR_TABLE.items() if rgb == (r, g, b)]
        label = " or ".join(f'"{a}"' for a in aliases)
        lines.append(f"- {label} -> {{r: {r}, g: {g}, b: {b}}}")
    return "\n".join(lines)


SHAPE_PROMPT_TEMPLATE = """You are a helpful assistant that helps users create shapes and text on a drawing board.
When a user requests a shape or text, extract the following information:

For shapes (rectangle, square, circle):
- actionType: "shape"
- shapeType: "rectangle", "square", or "circle"
- width: number (for rectangle and square)
- height: number (for rectangle only, for square it should equal width)
- radius: number (for circle, which will be used for both width and height as 2*radius)
- color: object with r, g, b values (0-255) - extract from color names like "red", "blue", "green", "yellow", "purple", "orange", "pink", "black", "white", "gray", etc. If no color specified, use null.
- x: number (optional, default to 100)
- y: number (optional, default to 100)

For text:
- actionType: "text"
- text: string (the text content to create)
- color: object with r, g, b values (0-255) - extract from color names. If no color specified, use null.
- x: number (optional, default to 100)
- y: number (optional, default to 100)

Color mapping examples:
{color_examples}

If the user doesn't provide dimensions for a shape, respond with a JSON object that has "needsDimensions": true and "shapeType" set.
If dimensions are provided, return a JSON object with all the properties.

Always respond with valid JSON only, no additional text.

User request: {message}"""


def build_shape_prompt(message: str) -> str:
    """Interpolate the user's message into the fixed instruction prompt."""
    return SHAPE_PROMPT_TEMPLATE.format(
        color_examples=_color_examples(),
        message=message,
    )


__all__ = ["COLOR_TABLE", "build_shape_prompt"]
