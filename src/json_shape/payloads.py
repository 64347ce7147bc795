# src/json_shape/payloads.py

from typing import Any

from pydantic import BaseModel, ConfigDict

from .models import Format, ParsedDocument, ParseFailure


class ValuePayload(BaseModel):
    value: Any
    start: int
    end: int

    model_config = ConfigDict(extra="forbid")


class DocumentPayload(BaseModel):
    """What the query evaluator receives."""

    format: Format
    count: int
    values: list[ValuePayload]
    metadata: dict[str, Any] = {}

    model_config = ConfigDict(extra="forbid")


class FailurePayload(BaseModel):
    """What the editor displays when nothing could be classified."""

    message: str
    offset: int | None = None
    line: int | None = None
    column: int | None = None

    model_config = ConfigDict(extra="forbid")


def to_payload(
    result: ParsedDocument | ParseFailure,
) -> DocumentPayload | FailurePayload:
    if isinstance(result, ParseFailure):
        return FailurePayload(
            message=result.message,
            offset=result.offset,
            line=result.line,
            column=result.column,
        )
    return DocumentPayload(
        format=result.format,
        count=len(result.values),
        values=[
            ValuePayload(value=v.value, start=v.segment.start, end=v.segment.end)
            for v in result.values
        ],
        metadata=dict(result.metadata),
    )
