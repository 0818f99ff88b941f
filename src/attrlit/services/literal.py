"""Literal services — render, unescape and check single attribute values.

Domain errors become failed ServiceResults with one of these codes:

- ``VALIDATION_ERROR``: a restricted code point (detail: ``code_point``, ``range``)
- ``PARSE_ERROR``: a malformed escape sequence (detail: ``symbol`` when known),
  or an escape that decodes to a lone surrogate (detail: ``code_point``)
- ``ENCODING_ERROR``: raw input holding a lone surrogate, which no output
  stream can encode (detail: ``code_point``)

A ``ValueError`` from a too-short literal is not converted.
"""

from __future__ import annotations

import logging

from attrlit.domain.arg import ArgumentValue
from attrlit.domain.charset import find_illegal
from attrlit.domain.errors import ArgumentError, ParseError, ValidationError
from attrlit.domain.escape import unescape
from attrlit.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
PARSE_ERROR = "PARSE_ERROR"
ENCODING_ERROR = "ENCODING_ERROR"


def _surrogate_error(code: str, text: str) -> ServiceError | None:
    for char in text:
        if "\ud800" <= char <= "\udfff":
            return ServiceError(
                code=code,
                message=f"Character #{ord(char):04X} is a lone surrogate and cannot be encoded",
                detail={"code_point": f"#{ord(char):04X}"},
            )
    return None


def _failure(op: str, exc: ArgumentError) -> ServiceResult:
    if isinstance(exc, ValidationError):
        error = ServiceError(
            code=VALIDATION_ERROR,
            message=str(exc),
            detail={
                "code_point": f"#{exc.code_point:02X}",
                "range": f"#{exc.low:02X}-#{exc.high:02X}",
            },
        )
    else:
        symbol = exc.symbol if isinstance(exc, ParseError) else None
        detail = {"symbol": symbol} if symbol is not None else {}
        error = ServiceError(code=PARSE_ERROR, message=str(exc), detail=detail)
    logger.debug("%s failed: %s", op, exc)
    return ServiceResult(ok=False, op=op, error=error)


def render_literal(raw: str) -> ServiceResult:
    """Validate *raw* and render it as a quoted literal."""
    encoding_error = _surrogate_error(ENCODING_ERROR, raw)
    if encoding_error is not None:
        return ServiceResult(ok=False, op="render", error=encoding_error)
    try:
        value = ArgumentValue(raw)
    except ArgumentError as exc:
        return _failure("render", exc)
    literal = value.render()
    logger.debug("rendered %d chars into %d", len(raw), len(literal))
    return ServiceResult(ok=True, op="render", data={"raw": raw, "literal": literal})


def unescape_literal(literal: str) -> ServiceResult:
    """Recover the raw text of a quoted literal."""
    encoding_error = _surrogate_error(ENCODING_ERROR, literal)
    if encoding_error is not None:
        return ServiceResult(ok=False, op="unescape", error=encoding_error)
    try:
        raw = unescape(literal)
    except ArgumentError as exc:
        return _failure("unescape", exc)
    encoding_error = _surrogate_error(PARSE_ERROR, raw)
    if encoding_error is not None:
        logger.debug("unescape produced %s", encoding_error.detail["code_point"])
        return ServiceResult(ok=False, op="unescape", error=encoding_error)
    logger.debug("unescaped %d chars into %d", len(literal), len(raw))
    return ServiceResult(ok=True, op="unescape", data={"literal": literal, "raw": raw})


def check_value(raw: str) -> ServiceResult:
    """Report every restricted character in *raw*.

    Fails with ``VALIDATION_ERROR`` when any is found. The message describes
    the first offender; ``error.detail["violations"]`` lists all of them.
    """
    violations = find_illegal(raw)
    if not violations:
        return ServiceResult(
            ok=True,
            op="check",
            data={"legal": True, "count": 0, "length": len(raw)},
        )
    first = violations[0]
    logger.debug("check found %d restricted characters", len(violations))
    error = ServiceError(
        code=VALIDATION_ERROR,
        message=str(ValidationError(first.code_point, first.low, first.high)),
        detail={
            "count": len(violations),
            "violations": [v.as_dict() for v in violations],
        },
    )
    return ServiceResult(ok=False, op="check", error=error)
