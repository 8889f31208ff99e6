"""
FastAPI dependencies wiring routes to services
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from boardroom.config.completion import OrchestratorConfig
from boardroom.repositories import BoardRepository, ConversationRepository, MessageRepository
from boardroom.services.completion_service import CompletionService
from boardroom.services.context_assembler import ContextAssembler
from boardroom.services.database import DatabaseManager
from boardroom.services.response_orchestrator import ResponseOrchestrator
from boardroom.services.summary_composer import SummaryComposer


def get_db(request: Request) -> DatabaseManager:
    """Database manager initialized by the app lifespan"""
    return request.app.state.db


def get_completion_service(request: Request) -> CompletionService:
    """Shared completion client initialized by the app lifespan"""
    return request.app.state.completion_service


def get_orchestrator_config(request: Request) -> OrchestratorConfig:
    return getattr(request.app.state, "orchestrator_config", None) or OrchestratorConfig.from_env()


async def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id")
) -> str:
    """Caller identity, set by the upstream gateway after authentication"""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Authentication required")
    return x_user_id.strip()


def get_response_orchestrator(
    db: DatabaseManager = Depends(get_db),
    completion_service: CompletionService = Depends(get_completion_service),
    config: OrchestratorConfig = Depends(get_orchestrator_config)
) -> ResponseOrchestrator:
    return ResponseOrchestrator(
        board_repository=BoardRepository(db),
        context_assembler=ContextAssembler(MessageRepository(db), config),
        completion_service=completion_service,
        config=config
    )


def get_summary_composer(
    db: DatabaseManager = Depends(get_db),
    completion_service: CompletionService = Depends(get_completion_service)
) -> SummaryComposer:
    return SummaryComposer(
        conversation_repository=ConversationRepository(db),
        completion_service=completion_service
    )
