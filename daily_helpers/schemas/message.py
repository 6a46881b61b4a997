# ==============================================================================
# MESSAGE WRAPPER - Typed, Nestable Messages
# ==============================================================================
# Generic container for error / success / warning messages with optional
# author, timestamp and nested child messages. Serializable to JSON.
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class MessageType(str, Enum):
    """Kinds of message."""
    ERROR = "Error"
    SUCCESS = "Success"
    WARNING = "Warning"


class Message(BaseModel, Generic[T]):
    """
    Message of a given type carrying typed content.

    Messages form trees: ``add`` appends a child, so a top-level error can
    carry its sub-errors. ``Message[T]`` validates content against ``T``;
    the bare ``Message`` accepts any JSON-serializable content.

    Attributes:
        type: Error, Success or Warning
        content: Message content
        timestamp: When the message was created or last updated
        author: Name of the message author
        messages: Ordered child messages

    Example:
        >>> error = Message.create_error("Order rejected")
        >>> error.add(Message.create_error("Quantity must be positive"))
        >>> Message.from_json(error.to_json()) == error
        True
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    type: MessageType = Field(
        ...,
        description="Message type"
    )
    content: T = Field(
        ...,
        description="Message content"
    )
    timestamp: Optional[datetime] = Field(
        None,
        description="Creation or update timestamp"
    )
    author: Optional[str] = Field(
        None,
        description="Message author"
    )
    messages: List["Message[T]"] = Field(
        default_factory=list,
        description="Nested child messages"
    )

    # --------------------------------------------------------------------------
    # CONSTRUCTORS
    # --------------------------------------------------------------------------
    @classmethod
    def create_error(cls, content: T) -> "Message[T]":
        return cls(type=MessageType.ERROR, content=content)

    @classmethod
    def create_success(cls, content: T) -> "Message[T]":
        return cls(type=MessageType.SUCCESS, content=content)

    @classmethod
    def create_warning(cls, content: T) -> "Message[T]":
        return cls(type=MessageType.WARNING, content=content)

    # --------------------------------------------------------------------------
    # TYPE PREDICATES
    # --------------------------------------------------------------------------
    def is_error(self) -> bool:
        return self.type == MessageType.ERROR

    def is_success(self) -> bool:
        return self.type == MessageType.SUCCESS

    def is_warning(self) -> bool:
        return self.type == MessageType.WARNING

    # --------------------------------------------------------------------------
    # CHILD MESSAGES
    # --------------------------------------------------------------------------
    def add(self, message: "Message[T]") -> None:
        """Append a child message."""
        self.messages.append(message)

    # --------------------------------------------------------------------------
    # SERIALIZATION & FORMATTING
    # --------------------------------------------------------------------------
    def to_json(self) -> str:
        """Serialize the message tree to a JSON string."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Message[T]":
        """
        Deserialize a message tree produced by ``to_json``.

        Raises:
            pydantic.ValidationError: If the JSON does not describe a message
        """
        return cls.model_validate_json(data)

    def format(self, template: str) -> str:
        """
        Interpolate the content into ``template``.

        Both ``"{0}"`` and ``"{}"`` placeholders refer to the content.
        """
        return template.format(self.content)


Message.model_rebuild()
