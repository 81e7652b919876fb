"""Options that control schema validation of request and response bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class SchemaValidationSettings:
    """Settings applied while validating a value against a schema."""

    fail_fast: bool = False
    multi_error: bool = False
    as_request: bool = False
    as_response: bool = False


SchemaValidationOption = Callable[[SchemaValidationSettings], None]


def _option(**values: bool) -> SchemaValidationOption:
    def apply(settings: SchemaValidationSettings) -> None:
        for name, value in values.items():
            setattr(settings, name, value)

    return apply


def fail_fast() -> SchemaValidationOption:
    """Return schema validation errors quicker."""
    return _option(fail_fast=True)


def multi_errors() -> SchemaValidationOption:
    """Collect every validation error."""
    return _option(multi_error=True)


def visit_as_request() -> SchemaValidationOption:
    """Validate as a request body."""
    return _option(as_request=True, as_response=False)


def visit_as_response() -> SchemaValidationOption:
    """Validate as a response body."""
    return _option(as_request=False, as_response=True)


def new_schema_validation_settings(*args: SchemaValidationOption) -> SchemaValidationSettings:
    """Build settings by applying the given options in order."""
    settings = SchemaValidationSettings()
    for option in args:
        option(settings)
    return settings