"""
Conversation summarization: one combined prompt over the whole transcript,
one completion call, one structured summary record.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from boardroom.models.conversation import ChatRole, ChatTurn, Conversation, Message, MessageType
from boardroom.models.persona import Board
from boardroom.models.responses import SummaryFormat, SummaryRecord
from boardroom.repositories.conversation_repository import ConversationRepository
from boardroom.services.completion_service import CompletionService
from boardroom.services.exceptions import (
    ExternalServiceError,
    NotFoundError,
    ValidationError,
    classify_failure
)


logger = logging.getLogger(__name__)


SUMMARY_TEMPERATURE = 0.3

UNKNOWN_ADVISOR_NAME = "Advisor"

EMPTY_SUMMARY_TEXT = "Unable to generate summary."

SUMMARY_SYSTEM_PROMPT = (
    "You are an expert executive assistant specializing in meeting summaries and "
    "strategic analysis. Provide clear, well-structured summaries that highlight "
    "key business insights."
)

EXECUTIVE_SUMMARY_TEMPLATE = """Please provide an executive summary of this AI boardroom conversation. Focus on:
- Key decisions made
- Main recommendations from advisors
- Action items identified
- Strategic insights

Keep it concise and business-focused (max 300 words).

Conversation:
{transcript}"""

DETAILED_SUMMARY_TEMPLATE = """Please provide a detailed summary of this AI boardroom conversation including:
- Overview of topics discussed
- Key insights from each advisor
- Recommendations and strategic advice given
- Important decisions or conclusions reached
- Next steps or action items mentioned

Conversation:
{transcript}"""


def render_transcript(messages: Sequence[Message], board: Board) -> str:
    """Plain-text transcript, one paragraph per message"""
    lines: List[str] = []
    for message in messages:
        if message.type == MessageType.USER:
            lines.append(f"User: {message.content}")
        elif message.type == MessageType.PERSONA:
            persona = board.find_persona(message.persona_id)
            name = persona.name if persona else UNKNOWN_ADVISOR_NAME
            lines.append(f"{name}: {message.content}")
        else:
            lines.append(message.content)
    return "\n\n".join(lines)


def build_summary_prompt(transcript: str, summary_format: SummaryFormat) -> str:
    template = (
        EXECUTIVE_SUMMARY_TEMPLATE
        if summary_format == SummaryFormat.EXECUTIVE
        else DETAILED_SUMMARY_TEMPLATE
    )
    return template.format(transcript=transcript)


class SummaryComposer:
    """Builds a structured digest of a whole conversation"""

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        completion_service: CompletionService,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.conversations = conversation_repository
        self.completion = completion_service
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def summarize(
        self,
        conversation_id: str,
        user_id: str,
        summary_format: SummaryFormat = SummaryFormat.DETAILED
    ) -> SummaryRecord:
        """
        Summarize a conversation owned by the caller.

        Raises:
            NotFoundError: Conversation missing or not owned by the caller
            ValidationError: Conversation has no messages
            ExternalServiceError: The completion call failed
        """
        summary_format = SummaryFormat(summary_format)

        conversation = await self.conversations.get_for_owner(conversation_id, user_id)
        if not conversation:
            raise NotFoundError("Conversation not found")

        if not conversation.messages:
            raise ValidationError("No messages found in conversation")

        messages = self.build_messages(conversation, summary_format)

        try:
            summary = await self.completion.complete(
                messages,
                max_output_tokens=summary_format.max_output_tokens,
                temperature=SUMMARY_TEMPERATURE
            )
        except ExternalServiceError as e:
            logger.error(f"AI summary generation error for conversation {conversation_id}: {e}")
            raise
        except Exception as e:
            logger.error(f"AI summary generation error for conversation {conversation_id}: {e}")
            raise ExternalServiceError(str(e), reason=classify_failure(e)) from e

        return self._to_record(conversation, summary or EMPTY_SUMMARY_TEXT, summary_format)

    def build_messages(
        self,
        conversation: Conversation,
        summary_format: SummaryFormat
    ) -> List[ChatTurn]:
        transcript = render_transcript(conversation.messages, conversation.board)
        return [
            ChatTurn(role=ChatRole.SYSTEM, content=SUMMARY_SYSTEM_PROMPT),
            ChatTurn(role=ChatRole.USER, content=build_summary_prompt(transcript, summary_format))
        ]

    def _to_record(
        self,
        conversation: Conversation,
        summary: str,
        summary_format: SummaryFormat
    ) -> SummaryRecord:
        generated_at = self._clock().astimezone(timezone.utc)
        return SummaryRecord(
            conversation_id=conversation.id,
            conversation_title=conversation.title,
            board_name=conversation.board.name,
            date=conversation.created_at.date().isoformat(),
            participants=conversation.board.persona_names,
            message_count=conversation.message_count,
            summary=summary,
            format=summary_format,
            generated_at=generated_at.isoformat().replace("+00:00", "Z")
        )
