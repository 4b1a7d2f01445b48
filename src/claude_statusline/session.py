"""Session snapshot parsing.

The host pipes one JSON object per render. Decoding happens in two stages:

1. ``parse_raw`` validates the payload against the permissive ``Raw*``
   pydantic models, which mirror the wire format. Only ``model.display_name``
   is required; malformed optional values decay to ``None``.
2. ``normalize`` flattens the raw shape into a ``SessionSnapshot`` of
   frozen dataclasses with defaults substituted.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

logger = logging.getLogger(__name__)


class SessionParseError(Exception):
    """Raised when a payload cannot produce a status line."""


class InvalidSessionJSONError(SessionParseError):
    """The payload is not valid JSON."""


class MissingModelError(SessionParseError):
    """The payload has no usable ``model.display_name``."""


def _decay_to_none(
    cls: type[BaseModel],
    value: Any,
    handler: ValidatorFunctionWrapHandler,
    info: ValidationInfo,
) -> Any:
    try:
        return handler(value)
    except ValidationError as e:
        logger.debug(
            "Ignoring malformed %s.%s: %s",
            cls.__name__,
            info.field_name,
            e.errors()[0]["msg"],
        )
        return None


# =============================================================================
# Raw wire models
# =============================================================================


class _OptionalSection(BaseModel):
    """Base for optional payload sections: every field may be absent or bad."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Must stay above _lenient so its errors are caught there.
    @field_validator("*", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("booleans are not numbers")
        return value

    @field_validator("*", mode="wrap")
    @classmethod
    def _lenient(cls, value, handler, info):
        return _decay_to_none(cls, value, handler, info)


class RawCost(_OptionalSection):
    total_cost_usd: Optional[float] = Field(None, allow_inf_nan=False)
    total_api_duration_ms: Optional[StrictInt] = Field(None, ge=0)


class RawContextWindow(_OptionalSection):
    used_percentage: Optional[float] = Field(None, allow_inf_nan=False)
    total_input_tokens: Optional[StrictInt] = Field(None, ge=0)
    total_output_tokens: Optional[StrictInt] = Field(None, ge=0)


class RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    display_name: str


class RawSessionData(BaseModel):
    """The subset of the host's status line payload this program reads."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    model: RawModel
    cost: Optional[RawCost] = None
    context_window: Optional[RawContextWindow] = None

    @field_validator("cost", "context_window", mode="wrap")
    @classmethod
    def _lenient(cls, value, handler, info):
        return _decay_to_none(cls, value, handler, info)


# =============================================================================
# Normalized snapshot
# =============================================================================


@dataclass(frozen=True)
class Model:
    display_name: str


@dataclass(frozen=True)
class Percentage:
    used_percentage: float = 0.0

    @property
    def percent(self) -> int:
        """Whole percent used, rounded down."""
        return math.floor(self.used_percentage)


@dataclass(frozen=True)
class Tokens:
    total_input_tokens: int = 0
    total_output_tokens: int = 0


@dataclass(frozen=True)
class Amount:
    total_cost_usd: float = 0.0


@dataclass(frozen=True)
class Duration:
    total_api_duration_ms: int = 0


@dataclass(frozen=True)
class SessionSnapshot:
    """Flattened, fully-defaulted view of one status line payload."""

    model: Model
    percentage: Percentage = field(default_factory=Percentage)
    tokens: Tokens = field(default_factory=Tokens)
    cost: Amount = field(default_factory=Amount)
    duration: Duration = field(default_factory=Duration)


def parse_raw(payload: Union[bytes, str]) -> RawSessionData:
    """
    Decode a payload into the raw wire shape.

    Raises:
        InvalidSessionJSONError: If the payload is not valid JSON
        MissingModelError: If the model display name is absent
    """
    try:
        data = json.loads(payload)
    except ValueError as e:
        raise InvalidSessionJSONError(f"Session payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MissingModelError(
            f"Session payload must be a JSON object, got {type(data).__name__}"
        )

    try:
        return RawSessionData.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        raise MissingModelError(f"Session payload is missing {location}: {error['msg']}") from e


def normalize(raw: RawSessionData) -> SessionSnapshot:
    """Flatten a raw payload, substituting defaults for absent values."""
    cost = raw.cost or RawCost()
    context = raw.context_window or RawContextWindow()

    def _or(value, default):
        return default if value is None else value

    return SessionSnapshot(
        model=Model(display_name=raw.model.display_name),
        percentage=Percentage(used_percentage=_or(context.used_percentage, 0.0)),
        tokens=Tokens(
            total_input_tokens=_or(context.total_input_tokens, 0),
            total_output_tokens=_or(context.total_output_tokens, 0),
        ),
        cost=Amount(total_cost_usd=_or(cost.total_cost_usd, 0.0)),
        duration=Duration(total_api_duration_ms=_or(cost.total_api_duration_ms, 0)),
    )


def parse_session(payload: Union[bytes, str]) -> SessionSnapshot:
    """Parse a status line payload into a ``SessionSnapshot``."""
    return normalize(parse_raw(payload))
