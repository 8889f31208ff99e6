"""
Request and result models for persona replies and conversation summaries
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


MAX_MESSAGE_LENGTH = 5000


class GenerateResponsesRequest(BaseModel):
    """Body of a persona reply request"""

    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)
    conversation_id: Optional[str] = Field(None, alias="conversationId")
    selected_persona_ids: Optional[List[str]] = Field(None, alias="selectedPersonaIds")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "message": "Should we expand into the European market next year?",
                "conversationId": "conv_123",
                "selectedPersonaIds": ["persona_cfo", "persona_cmo"]
            }
        }
    )


class PersonaResponse(BaseModel):
    """One persona's reply; not persisted"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    persona_id: str = Field(..., alias="personaId")
    persona_name: str = Field(..., alias="personaName")
    response: str
    degraded: bool = Field(
        False,
        exclude=True,
        description="True when the text is the templated fallback instead of generated"
    )


class SummaryFormat(str, Enum):
    """Summary styles and their generation budgets"""
    DETAILED = "detailed"
    EXECUTIVE = "executive"

    @property
    def max_output_tokens(self) -> int:
        return 400 if self is SummaryFormat.EXECUTIVE else 800


class SummaryRequest(BaseModel):
    """Body of a summary request"""
    format: SummaryFormat = SummaryFormat.DETAILED


class SummaryRecord(BaseModel):
    """Structured digest of a conversation; not persisted"""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    conversation_id: str = Field(..., alias="conversationId")
    conversation_title: str = Field(..., alias="conversationTitle")
    board_name: str = Field(..., alias="boardName")
    date: str = Field(..., description="Conversation creation date, YYYY-MM-DD")
    participants: List[str] = Field(default_factory=list)
    message_count: int = Field(..., ge=1, alias="messageCount")
    summary: str
    format: SummaryFormat
    generated_at: str = Field(..., alias="generatedAt")
