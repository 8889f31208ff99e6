"""
Persona Response Orchestrator

Selects which personas on a board answer a user message, asks the completion
service for one in-character reply per persona, and returns the replies in
roster order.

Features:
- Roster-ordered selection (explicit ids, or the first few personas)
- Concurrent fan-out with one isolated unit of work per persona
- Per-call deadline
- Failed calls degrade to a templated reply instead of failing the request
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from boardroom.config.completion import OrchestratorConfig
from boardroom.models.conversation import ChatRole, ChatTurn
from boardroom.models.persona import Persona
from boardroom.models.responses import PersonaResponse
from boardroom.repositories.board_repository import BoardRepository
from boardroom.services.completion_service import CompletionService
from boardroom.services.context_assembler import ContextAssembler
from boardroom.services.exceptions import (
    FailureReason,
    ForbiddenError,
    NotFoundError,
    classify_failure
)
from boardroom.services.persona_prompt_builder import PersonaPromptBuilder


logger = logging.getLogger(__name__)


# Bounds per-request latency and cost when the caller picks no personas
DEFAULT_RESPONDER_LIMIT = 3

PERSONA_MAX_OUTPUT_TOKENS = 200
PERSONA_TEMPERATURE = 0.7

EMPTY_COMPLETION_TEXT = "I'm thinking about your question..."


def degraded_response_text(persona_name: str) -> str:
    return (
        f"As {persona_name}, I'd be happy to help with that. "
        "Could you provide more context about your specific situation?"
    )


@dataclass(frozen=True)
class GeneratedReply:
    """The completion call for a persona succeeded"""
    persona: Persona
    text: str


@dataclass(frozen=True)
class DegradedReply:
    """The completion call for a persona failed; a template stands in"""
    persona: Persona
    reason: FailureReason

    @property
    def text(self) -> str:
        return degraded_response_text(self.persona.name)


PersonaOutcome = Union[GeneratedReply, DegradedReply]


def select_responding_personas(
    roster: Sequence[Persona],
    selected_persona_ids: Optional[Iterable[str]] = None,
    limit: int = DEFAULT_RESPONDER_LIMIT
) -> List[Persona]:
    """
    Pick the responding set from a board roster.

    Explicit ids filter the roster and keep the roster's order, whatever
    order the ids were given in. Without ids, the first ``limit`` roster
    personas respond.
    """
    selected = set(selected_persona_ids or [])
    if selected:
        return [p for p in roster if p.id in selected]
    return list(roster[:limit])


def resolve_responses(outcomes: Sequence[PersonaOutcome]) -> List[PersonaResponse]:
    """Reduce per-persona outcomes to the caller-visible response list, same order"""
    responses = []
    for outcome in outcomes:
        if isinstance(outcome, GeneratedReply):
            text = outcome.text if outcome.text and outcome.text.strip() else EMPTY_COMPLETION_TEXT
            degraded = False
        else:
            text = outcome.text
            degraded = True

        responses.append(PersonaResponse(
            persona_id=outcome.persona.id,
            persona_name=outcome.persona.name,
            response=text,
            degraded=degraded
        ))
    return responses


class ResponseOrchestrator:
    """Drives one completion call per responding persona"""

    def __init__(
        self,
        board_repository: BoardRepository,
        context_assembler: ContextAssembler,
        completion_service: CompletionService,
        prompt_builder: Optional[PersonaPromptBuilder] = None,
        config: Optional[OrchestratorConfig] = None
    ):
        self.boards = board_repository
        self.context = context_assembler
        self.completion = completion_service
        self.prompts = prompt_builder or PersonaPromptBuilder()
        self.config = config or OrchestratorConfig()

    async def generate(
        self,
        board_id: str,
        user_id: str,
        message: str,
        conversation_id: Optional[str] = None,
        selected_persona_ids: Optional[List[str]] = None
    ) -> List[PersonaResponse]:
        """
        Generate replies from a board's personas.

        Args:
            board_id: Board whose roster answers
            user_id: Caller, for the access check
            message: The user's new message
            conversation_id: Conversation to draw context from, if any
            selected_persona_ids: Restrict the responders to these personas

        Returns:
            One PersonaResponse per responding persona, in roster order

        Raises:
            NotFoundError: The board does not exist
            ForbiddenError: The board is private and not owned by the caller
        """
        board = await self.boards.get_with_personas(board_id)
        if not board:
            raise NotFoundError("Board not found")

        if not board.is_accessible_by(user_id):
            raise ForbiddenError("Access denied to this board")

        responding = select_responding_personas(board.personas, selected_persona_ids)
        if not responding:
            logger.info(f"No personas selected to respond on board {board_id}")
            return []

        history = await self.context.assemble(conversation_id)

        # gather keeps input order regardless of completion order
        outcomes = await asyncio.gather(*(
            self._respond_as(persona, history, message) for persona in responding
        ))

        degraded = sum(1 for o in outcomes if isinstance(o, DegradedReply))
        logger.info(
            f"Generated {len(outcomes)} persona responses for board {board_id} "
            f"({degraded} degraded)"
        )
        return resolve_responses(outcomes)

    def build_messages(
        self,
        persona: Persona,
        history: Sequence[ChatTurn],
        message: str
    ) -> List[ChatTurn]:
        """System prompt, then prior turns, then the new user message"""
        return [
            ChatTurn(role=ChatRole.SYSTEM, content=self.prompts.build(persona)),
            *history,
            ChatTurn(role=ChatRole.USER, content=message)
        ]

    async def _respond_as(
        self,
        persona: Persona,
        history: Sequence[ChatTurn],
        message: str
    ) -> PersonaOutcome:
        """One isolated unit of work; never raises for a failed call"""
        messages = self.build_messages(persona, history, message)
        timeout = self.config.persona_call_timeout

        try:
            call = self.completion.complete(
                messages,
                max_output_tokens=PERSONA_MAX_OUTPUT_TOKENS,
                temperature=PERSONA_TEMPERATURE
            )
            if timeout:
                text = await asyncio.wait_for(call, timeout=timeout)
            else:
                text = await call

        except asyncio.TimeoutError:
            logger.warning(f"AI response for {persona.name} timed out after {timeout}s")
            return DegradedReply(persona=persona, reason=FailureReason.TIMEOUT)

        except Exception as e:
            reason = classify_failure(e)
            logger.error(f"AI response error for {persona.name} ({reason.value}): {e}")
            return DegradedReply(persona=persona, reason=reason)

        return GeneratedReply(persona=persona, text=text)
