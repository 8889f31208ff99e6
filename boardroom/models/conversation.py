"""
Conversation and Message models

Messages are a closed tagged variant on ``type``: each variant carries only
the author reference that is valid for it.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field, ConfigDict, TypeAdapter

from .persona import Board


class MessageType(str, Enum):
    """Author kinds for a conversation message"""
    USER = "USER"
    PERSONA = "PERSONA"
    SYSTEM = "SYSTEM"


class ChatRole(str, Enum):
    """Roles understood by the completion service"""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """One role-tagged entry of a completion request"""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: ChatRole
    content: str


class _MessageBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    content: str
    created_at: datetime


class UserMessage(_MessageBase):
    """Message written by the conversation's user"""
    type: Literal["USER"] = "USER"
    user_id: str


class PersonaMessage(_MessageBase):
    """Message attributed to a persona"""
    type: Literal["PERSONA"] = "PERSONA"
    persona_id: Optional[str] = Field(
        None,
        description="None once the persona has been deleted"
    )
    persona_name: Optional[str] = Field(
        None,
        description="Joined from the persona table; None when the persona no longer exists"
    )


class SystemMessage(_MessageBase):
    """Message with no author"""
    type: Literal["SYSTEM"] = "SYSTEM"


Message = Annotated[
    Union[UserMessage, PersonaMessage, SystemMessage],
    Field(discriminator="type")
]

message_adapter: TypeAdapter = TypeAdapter(Message)


def parse_message(data) -> Union[UserMessage, PersonaMessage, SystemMessage]:
    """Build the right message variant from a storage row or dict"""
    return message_adapter.validate_python(dict(data))


class Conversation(BaseModel):
    """A conversation between a user and a board, with its full transcript"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    context: Optional[str] = None
    user_id: str
    board: Board
    created_at: datetime
    messages: List[Message] = Field(
        default_factory=list,
        description="Ordered by creation time ascending"
    )

    @property
    def message_count(self) -> int:
        return len(self.messages)
