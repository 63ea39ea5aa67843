"""Validation helpers and the JSON envelope shared by every route."""
from typing import Any, Dict, List, Optional, Union
import re

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid_email(email: Any) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_REGEX.match(email) is not None


def sanitize_input(value: Any) -> Any:
    """Trim a string and strip angle brackets; other values pass through."""
    if not isinstance(value, str):
        return value
    return value.strip().replace("<", "").replace(">", "")


def _stripped_length(value: Optional[str]) -> int:
    return len(value.strip()) if isinstance(value, str) else 0


def validate_contact_form(data: Dict[str, Any]) -> List[str]:
    """Return every violation found in a contact submission (empty means valid)."""
    errors = []

    if _stripped_length(data.get("event_name")) < 3:
        errors.append("Event name is required and must be at least 3 characters")

    if not is_valid_email(data.get("email")):
        errors.append("Valid email is required")

    if _stripped_length(data.get("name")) < 2:
        errors.append("Name is required and must be at least 2 characters")

    if _stripped_length(data.get("details")) < 10:
        errors.append("Details must be at least 10 characters")

    return errors


def error_body(errors: Union[str, List[str]], status_code: int = 400) -> Dict[str, Any]:
    return {
        "success": False,
        "errors": errors if isinstance(errors, list) else [errors],
        "statusCode": status_code,
    }


def success_body(data: Any = None, message: str = "Success", status_code: int = 200) -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": data if data is not None else {},
        "statusCode": status_code,
    }


def error_response(errors: Union[str, List[str]], status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(errors, status_code))


def success_response(data: Any = None, message: str = "Success", status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(success_body(data, message, status_code)),
    )
