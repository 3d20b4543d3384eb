"""
Base model for raw records coming out of Supabase (snake_case columns) or
the document store (camelCase fields).
"""
import logging
from datetime import datetime

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


def timestamp(value) -> float:
    """
    Epoch milliseconds from either a number or an ISO-8601 string. Missing or
    unparseable values sort as the oldest possible record.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, datetime):
        return value.timestamp() * 1000
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return 0.0
    return parsed.timestamp() * 1000


def validation_summary(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in error.errors()
    )


def none_if_invalid(value, handler, info):
    """
    Wrap-validator body for optional fields nothing scores: a malformed value
    is logged and dropped instead of rejecting the whole record.
    """
    try:
        return handler(value)
    except ValidationError as e:
        logger.warning("Ignoring malformed %s: %s", info.field_name, validation_summary(e))
        return None


class RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        allow_inf_nan=False,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data):
        if not isinstance(data, dict):
            return data
        # null columns fall back to the field default
        data = {key: value for key, value in data.items() if value is not None}
        if "id" not in data and "_id" in data:
            data["id"] = data["_id"]
        return data

    @field_validator("created_at", mode="before", check_fields=False)
    @classmethod
    def _epoch_millis(cls, value):
        return timestamp(value)

    @field_validator("funding_goal", "equity_offered", "min", "max", mode="before", check_fields=False)
    @classmethod
    def _reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("expected a number, got a boolean")
        return value

    @field_validator("tags", "preferred_industries", "preferred_stages", mode="before", check_fields=False)
    @classmethod
    def _lowercase_set(cls, value):
        # anything that isn't a collection is left for the field type to reject
        if isinstance(value, (list, tuple, set, frozenset)):
            cleaned = (str(item).strip().lower() for item in value)
            return frozenset(item for item in cleaned if item)
        return value


class Range(RecordModel):
    """A {min, max} amount or percentage bound."""

    min: float
    max: float

    @model_validator(mode="after")
    def _ordered(self):
        if self.min > self.max:
            raise ValueError("min is above max")
        return self
