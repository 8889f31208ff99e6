"""
API routes for board persona replies
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Path

from boardroom.api.dependencies import get_current_user_id, get_response_orchestrator
from boardroom.api.responses import error_response
from boardroom.models.responses import GenerateResponsesRequest
from boardroom.services.exceptions import BoardroomError
from boardroom.services.response_orchestrator import ResponseOrchestrator


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/boards", tags=["boards"])


@router.post("/{board_id}/ai-response")
async def generate_ai_response(
    request: GenerateResponsesRequest,
    board_id: str = Path(..., description="Board whose personas respond"),
    user_id: str = Depends(get_current_user_id),
    orchestrator: ResponseOrchestrator = Depends(get_response_orchestrator)
) -> Dict[str, Any]:
    """Generate one in-character reply per responding persona"""
    try:
        responses = await orchestrator.generate(
            board_id=board_id,
            user_id=user_id,
            message=request.message,
            conversation_id=request.conversation_id,
            selected_persona_ids=request.selected_persona_ids
        )
    except BoardroomError:
        raise
    except Exception as e:
        logger.error(f"Generate AI response error: {e}")
        return error_response(500, "Error generating AI response", str(e))

    return {
        "success": True,
        "message": "AI responses generated successfully",
        "data": {
            "responses": [r.model_dump(by_alias=True) for r in responses]
        }
    }
