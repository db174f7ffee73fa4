"""Shared configuration for the pass data model."""

import typing as t
from datetime import datetime

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from pass_generator.formatting import format_pass_date, parse_pass_date


def _parse_date(value: t.Any) -> t.Any:
    if isinstance(value, str):
        try:
            return parse_pass_date(value)
        except ValueError:
            # Fall back to pydantic's own ISO 8601 parsing
            return value
    return value


PassDate = t.Annotated[
    datetime,
    BeforeValidator(_parse_date),
    PlainSerializer(format_pass_date, return_type=str, when_used="json"),
]


class PassModel(BaseModel):
    """Immutable model serialized with the camelCase keys of pass.json."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
        allow_inf_nan=False,
    )
