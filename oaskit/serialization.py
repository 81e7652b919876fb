"""Serialization styles of HTTP request parameters and bodies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SerializationStyle(str, Enum):
    """A parameter serialization style."""

    SIMPLE = "simple"
    LABEL = "label"
    MATRIX = "matrix"
    FORM = "form"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"


@dataclass(frozen=True)
class SerializationMethod:
    """How a request parameter or body is serialized."""

    style: str
    explode: bool = False