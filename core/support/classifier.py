"""Classification of management API responses."""

from __future__ import annotations

from http import HTTPStatus

from pydantic import ValidationError

from core.support.models import (
    ClassifiedResponse,
    ErrorReply,
    SuccessReply,
    SupportFailure,
    SupportSuccess,
)
from core.utils.errors import InvalidErrorBodyError, InvalidSuccessBodyError


def classify_response(status: int, body: bytes) -> ClassifiedResponse:
    """Decode a response as success (201 only) or failure (anything else).

    Raises:
        InvalidSuccessBodyError: 201 with a body that is not a success reply.
        InvalidErrorBodyError: non-201 with a body that is not an error reply.
    """

    if status == HTTPStatus.CREATED:
        try:
            reply = SuccessReply.model_validate_json(body)
        except ValidationError as exc:
            raise InvalidSuccessBodyError(
                f"failed to validate good response: {exc}", status=status, body=body
            ) from exc
        return SupportSuccess(status=status, reply=reply)

    try:
        error_reply = ErrorReply.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidErrorBodyError(
            f"failed to validate bad response: {exc}", status=status, body=body
        ) from exc
    return SupportFailure(status=status, reply=error_reply, reason=error_reply.reason)
