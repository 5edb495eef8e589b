"""
Schema Descriptor validation — one JSON Schema per tool, shared by both front ends.

validate_arguments(schema, raw) returns a new argument dict with:
  - undeclared fields dropped (every nesting level)
  - declared defaults filled in where the caller omitted the field
  - type / enum / pattern / minLength / format checks applied

and raises ValidationError(path, reason) on the first (best-matching) violation.

Formats:
  email       — RFC 5322 address syntax via email-validator (no DNS lookup)
  numeric-id  — ASCII digits only, whole string
"""

import copy
import re
from typing import Any, Dict, Mapping

import jsonschema
from email_validator import EmailNotValidError, validate_email
from jsonschema.exceptions import best_match

from .errors import ValidationError

NUMERIC_ID_FORMAT = "numeric-id"

_FORMAT_CHECKER = jsonschema.FormatChecker()
_NUMERIC_ID = re.compile(r"[0-9]+")


@_FORMAT_CHECKER.checks("email", raises=EmailNotValidError)
def _is_email(instance: Any) -> bool:
    if not isinstance(instance, str):
        return True
    validate_email(instance, check_deliverability=False)
    return True


@_FORMAT_CHECKER.checks(NUMERIC_ID_FORMAT)
def _is_numeric_id(instance: Any) -> bool:
    if not isinstance(instance, str):
        return True
    return _NUMERIC_ID.fullmatch(instance) is not None


def _project(schema: Mapping[str, Any], value: Any) -> Any:
    """Keep only declared properties and fill defaults, recursively."""
    if isinstance(value, Mapping) and "properties" in schema:
        properties = schema["properties"]
        projected: Dict[str, Any] = {}
        for key, prop in properties.items():
            if key in value:
                projected[key] = _project(prop, value[key])
            elif "default" in prop:
                projected[key] = copy.deepcopy(prop["default"])
        return projected

    if isinstance(value, list) and isinstance(schema.get("items"), Mapping):
        return [_project(schema["items"], item) for item in value]

    return value


def _error_path(error: jsonschema.ValidationError) -> str:
    parts = [str(p) for p in error.absolute_path]
    if error.validator == "required" and isinstance(error.instance, Mapping):
        missing = [name for name in error.validator_value if name not in error.instance]
        if missing:
            parts.append(missing[0])
    return ".".join(parts)


def _error_reason(error: jsonschema.ValidationError) -> str:
    if error.validator == "required":
        return "is required"
    if error.validator == "pattern":
        return f"{error.instance!r} does not match pattern {error.validator_value!r}"
    if error.validator == "format":
        return f"{error.instance!r} is not a valid {error.validator_value}"
    return error.message


def validate_arguments(schema: Mapping[str, Any], raw: Any) -> Dict[str, Any]:
    """
    Validate and default-fill a raw argument object against a tool schema.

    ``raw`` that is None or not an object is treated as ``{}``. The input is
    never mutated.

    Raises
    ------
    ValidationError
        With the dotted field path and a human-readable reason.
    """
    arguments = _project(schema, raw if isinstance(raw, Mapping) else {})

    validator = jsonschema.Draft202012Validator(schema, format_checker=_FORMAT_CHECKER)
    error = best_match(validator.iter_errors(arguments))
    if error is not None:
        raise ValidationError(_error_path(error), _error_reason(error), cause=error)

    return arguments
