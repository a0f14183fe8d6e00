import logging
import uuid
from dataclasses import dataclass
from typing import Callable, List, Literal, Optional

from board.canvas import Camera, Color, LayerLimitReached, LayerStore, LayerType, Point
from board.dialogue import IDLE, DialogueState, Idle, prompt_for, resolve_dimensions
from board.intent import DimensionRequest, TextIntent, parse_intent
from constants import DEFAULT_SHAPE_SIZE, DEFAULT_TEXT_HEIGHT, DEFAULT_TEXT_WIDTH, VIEW_OFFSET

logger = logging.getLogger(__name__)

GREETING = (
    "Hi! I can help you create shapes and text on the board. Try saying "
    "'create a red rectangle' or 'add text Hello World' or 'create a blue circle'."
)
ERROR_REPLY = "Sorry, I encountered an error. Please try again."
BOARD_FULL_REPLY = (
    "The board already has the maximum number of elements, so I couldn't add another one."
)


@dataclass(frozen=True)
class ChatMessage:
    id: str
    role: Literal["user", "assistant"]
    content: str


class Chatbot:
    """
    Conversation state for the board's shape assistant.

    ``request_intent`` is any callable taking the user's message and returning
    the intent endpoint's JSON reply (normally a :class:`board.intent.IntentClient`).
    ``last_used_color`` and ``camera`` mirror the board's current values and
    may be reassigned by the host between messages.
    """

    def __init__(
        self,
        store: LayerStore,
        request_intent: Callable[[str], dict],
        last_used_color: Color,
        camera: Optional[Camera] = None,
        user_id: str = "local",
    ):
        self.store = store
        self.request_intent = request_intent
        self.last_used_color = last_used_color
        self.camera = camera or Camera()
        self.user_id = user_id
        self.messages: List[ChatMessage] = [
            ChatMessage(id="1", role="assistant", content=GREETING)
        ]
        self.pending: DialogueState = IDLE
        self.is_open = False
        self.is_loading = False

    @property
    def placeholder(self) -> str:
        if isinstance(self.pending, Idle):
            return "Type your message..."
        return "Enter dimensions..."

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        self.pending = IDLE

    def _add_message(self, role: Literal["user", "assistant"], content: str) -> None:
        self.messages.append(ChatMessage(id=uuid.uuid4().hex, role=role, content=content))

    def _default_position(self) -> Point:
        # keeps new layers inside the visible viewport
        return Point(-self.camera.x + VIEW_OFFSET, -self.camera.y + VIEW_OFFSET)

    def _position(self, x: Optional[float], y: Optional[float]) -> Point:
        default = self._default_position()
        return Point(
            x if x is not None else default.x,
            y if y is not None else default.y,
        )

    def _insert(
        self,
        layer_type: LayerType,
        position: Point,
        width: float,
        height: float,
        color: Optional[Color],
        confirmation: str,
        text_value: Optional[str] = None,
    ) -> None:
        try:
            self.store.insert_layer(
                layer_type,
                position,
                width,
                height,
                default_fill=self.last_used_color,
                color=color,
                text_value=text_value,
                user_id=self.user_id,
            )
        except LayerLimitReached:
            self._add_message("assistant", BOARD_FULL_REPLY)
            return
        self._add_message("assistant", confirmation)

    def send(self, text: str) -> None:
        """Handle one message typed by the user."""
        if not text.strip() or self.is_loading:
            return

        user_message = text.strip()
        self._add_message("user", user_message)
        self.is_loading = True
        try:
            if isinstance(self.pending, Idle):
                self._handle_request(user_message)
            else:
                self._handle_dimensions(user_message)
        except Exception:
            logger.exception("Shape assistant failed to handle %r", user_message)
            self.pending = IDLE
            self._add_message("assistant", ERROR_REPLY)
        finally:
            self.is_loading = False

    def _handle_dimensions(self, user_message: str) -> None:
        resolution = resolve_dimensions(self.pending, user_message)
        if resolution.reprompt:
            self._add_message("assistant", resolution.reprompt)
            return
        self._insert(
            resolution.layer_type,
            self._default_position(),
            resolution.width,
            resolution.height,
            resolution.color,
            resolution.confirmation,
        )
        self.pending = IDLE

    def _handle_request(self, user_message: str) -> None:
        intent = parse_intent(self.request_intent(user_message))
        color = intent.color.to_color() if intent.color else self.last_used_color

        if isinstance(intent, TextIntent):
            value = intent.text or "Text"
            self._insert(
                LayerType.TEXT,
                self._position(intent.x, intent.y),
                DEFAULT_TEXT_WIDTH,
                DEFAULT_TEXT_HEIGHT,
                color,
                f'Perfect! I\'ve created text "{value}" on the board.',
                text_value=value,
            )
            return

        if isinstance(intent, DimensionRequest):
            state, question = prompt_for(intent.shapeType, color)
            self.pending = state
            self._add_message("assistant", question)
            return

        position = self._position(intent.x, intent.y)
        if intent.shapeType == "circle":
            if intent.width:
                width = intent.width
                height = intent.height or intent.width
            elif intent.radius:
                width = height = intent.radius * 2
            else:
                width = height = DEFAULT_SHAPE_SIZE
            self._insert(
                LayerType.ELLIPSE,
                position,
                width,
                height,
                color,
                f"Great! I've created a circle with radius {_fmt(width / 2)}px.",
            )
        else:
            width = intent.width or DEFAULT_SHAPE_SIZE
            if intent.shapeType == "square":
                height = intent.height or width
            else:
                height = intent.height or DEFAULT_SHAPE_SIZE
            self._insert(
                LayerType.RECTANGLE,
                position,
                width,
                height,
                color,
                f"Perfect! I've created a {intent.shapeType} with width {_fmt(width)}px "
                f"and height {_fmt(height)}px.",
            )
        self.pending = IDLE


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
