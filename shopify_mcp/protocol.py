"""
Response envelopes shared by both front ends.

  success: {"content": [{"type": "text", "text": "<json result>"}]}
  failure: {"error": "<message>", "details": <path/reason or traceback>}
"""

import json
import traceback
from typing import Any, Dict, List, Optional

from .errors import ExecutionError, ShopifyMCPError, ValidationError


def text_content(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text}


def tool_result_content(content: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"content": content}


def serialize_result(result: Any) -> str:
    return json.dumps(result, default=str)


def json_result(result: Any) -> Dict[str, Any]:
    """Wrap an executor result as serialized text content."""
    return tool_result_content([text_content(serialize_result(result))])


def _format_trace(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def error_details(exc: BaseException) -> Optional[Any]:
    if isinstance(exc, ValidationError):
        return {"path": exc.path, "reason": exc.reason}
    if isinstance(exc, ExecutionError):
        return _format_trace(exc.cause or exc)
    return None


def error_envelope(exc: BaseException) -> Dict[str, Any]:
    """{error, details} for a failed request. ``details`` is omitted when empty."""
    message = exc.message if isinstance(exc, ShopifyMCPError) else str(exc)
    envelope: Dict[str, Any] = {"error": message or "Tool execution failed"}
    details = error_details(exc)
    if details is not None:
        envelope["details"] = details
    return envelope


def error_status(exc: BaseException) -> int:
    if isinstance(exc, ShopifyMCPError):
        return exc.status_code
    return 500
