"""Validation options."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .schema.errors import SchemaValidationError
from .schema.loader import load_yaml

DEFAULT_MAX_COMPLEXITY_SCORE = 50
DEFAULT_TIMEOUT_MS = 30000


class ValidationOptions(BaseModel):
    """Which checks to run and how long they may take.

    Keys are accepted in camelCase (``checkReachability``) or snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    check_reachability: bool = True
    check_dead_ends: bool = True
    check_cycles: bool = True
    check_gateway_consistency: bool = True
    check_event_consistency: bool = True
    check_flow_consistency: bool = True
    strict_bpmn_compliance: bool = False
    max_complexity_score: float | None = Field(default=DEFAULT_MAX_COMPLEXITY_SCORE, ge=0)
    timeout_ms: float | None = Field(default=DEFAULT_TIMEOUT_MS, ge=0)

    def with_overrides(self, **overrides: Any) -> "ValidationOptions":
        """Return a copy with the given fields replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        data = self.model_dump()
        data.update(changes)
        return parse_options(data)


def parse_options(data: dict | None) -> ValidationOptions:
    """Validate a raw mapping into ValidationOptions.

    Raises:
        SchemaValidationError: If a key is unknown or a value has the wrong type.
    """
    try:
        return ValidationOptions.model_validate(data or {})
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Invalid validation options: {len(errors)} error(s)", errors
        ) from e


def load_options(path: str | Path) -> ValidationOptions:
    """Load ValidationOptions from a YAML file.

    The file may hold the options at its root or under a ``validation`` key.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the options are invalid.
    """
    data = load_yaml(path)
    if isinstance(data.get("validation"), dict):
        data = data["validation"]
    return parse_options(data)
