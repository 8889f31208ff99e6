"""
Data models for the Boardroom persona service
"""

from .persona import Persona, Board

from .conversation import (
    MessageType,
    ChatRole,
    ChatTurn,
    UserMessage,
    PersonaMessage,
    SystemMessage,
    Message,
    Conversation,
    parse_message
)

from .responses import (
    GenerateResponsesRequest,
    PersonaResponse,
    SummaryFormat,
    SummaryRequest,
    SummaryRecord,
    MAX_MESSAGE_LENGTH
)

__all__ = [
    # Roster models
    "Persona",
    "Board",
    # Conversation models
    "MessageType",
    "ChatRole",
    "ChatTurn",
    "UserMessage",
    "PersonaMessage",
    "SystemMessage",
    "Message",
    "Conversation",
    "parse_message",
    # Request/result models
    "GenerateResponsesRequest",
    "PersonaResponse",
    "SummaryFormat",
    "SummaryRequest",
    "SummaryRecord",
    "MAX_MESSAGE_LENGTH"
]
