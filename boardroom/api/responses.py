"""
Response envelope helpers shared by the API routes and exception handlers
"""

from typing import Optional

from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    """Failure envelope: {success: false, message, error?}"""
    body = {"success": False, "message": message}
    if error:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=body)
