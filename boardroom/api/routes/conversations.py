"""
API routes for conversation summaries
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path

from boardroom.api.dependencies import get_current_user_id, get_summary_composer
from boardroom.api.responses import error_response
from boardroom.models.responses import SummaryRequest
from boardroom.services.exceptions import BoardroomError, ExternalServiceError
from boardroom.services.summary_composer import SummaryComposer


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/conversations", tags=["conversations"])


@router.post("/{conversation_id}/summary")
async def generate_conversation_summary(
    conversation_id: str = Path(..., description="Conversation to summarize"),
    request: Optional[SummaryRequest] = Body(None),
    user_id: str = Depends(get_current_user_id),
    composer: SummaryComposer = Depends(get_summary_composer)
) -> Dict[str, Any]:
    """Summarize a conversation in detailed or executive format"""
    summary_request = request or SummaryRequest()

    try:
        record = await composer.summarize(
            conversation_id=conversation_id,
            user_id=user_id,
            summary_format=summary_request.format
        )
    except ExternalServiceError as e:
        return error_response(500, "Failed to generate AI summary", e.message)
    except BoardroomError:
        raise
    except Exception as e:
        logger.error(f"Generate conversation summary error: {e}")
        return error_response(500, "Failed to generate conversation summary", str(e))

    return {
        "success": True,
        "data": record.model_dump(by_alias=True)
    }
