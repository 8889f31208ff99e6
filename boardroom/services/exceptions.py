"""
Error taxonomy for persona orchestration and summarization
"""

from enum import Enum
from typing import Optional


class FailureReason(str, Enum):
    """Reasons a completion call can fail"""
    API_ERROR = "api_error"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    INVALID_RESPONSE = "invalid_response"
    AUTHENTICATION = "authentication"
    NETWORK_ERROR = "network_error"
    SERVICE_UNAVAILABLE = "service_unavailable"


class BoardroomError(Exception):
    """Base class for errors that fail a whole request"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BoardroomError):
    """Referenced board, conversation or persona does not exist"""
    status_code = 404


class ForbiddenError(BoardroomError):
    """Caller does not own the resource and it is not public"""
    status_code = 403


class ValidationError(BoardroomError):
    """Structurally invalid request, rejected before any external call"""
    status_code = 400


class ExternalServiceError(BoardroomError):
    """A completion call failed at the transport or provider level"""
    status_code = 500

    def __init__(
        self,
        message: str,
        reason: FailureReason = FailureReason.API_ERROR,
        status: Optional[int] = None
    ):
        super().__init__(message)
        self.reason = reason
        self.status = status


def classify_failure(error: BaseException) -> FailureReason:
    """Classify the type of failure from an exception"""
    if isinstance(error, ExternalServiceError):
        return error.reason

    error_str = str(error).lower()

    if "rate limit" in error_str or "too many requests" in error_str or "429" in error_str:
        return FailureReason.RATE_LIMIT
    elif "timeout" in error_str or "timed out" in error_str:
        return FailureReason.TIMEOUT
    elif "auth" in error_str or "api key" in error_str or "unauthorized" in error_str or "401" in error_str:
        return FailureReason.AUTHENTICATION
    elif "network" in error_str or "connection" in error_str:
        return FailureReason.NETWORK_ERROR
    elif "service unavailable" in error_str or "503" in error_str:
        return FailureReason.SERVICE_UNAVAILABLE
    elif "invalid response" in error_str:
        return FailureReason.INVALID_RESPONSE
    else:
        return FailureReason.API_ERROR
