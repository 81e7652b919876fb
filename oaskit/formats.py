"""String format checks used when validating schema values."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern

FORMAT_OF_STRING_FOR_UUID_OF_RFC4122 = (
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)

FormatCallback = Callable[[str], None]


class SchemaError(ValueError):
    """A value does not satisfy a schema constraint."""

    def __init__(self, value: object, reason: str, schema_field: str = "") -> None:
        super().__init__(reason)
        self.value = value
        self.reason = reason
        self.schema_field = schema_field

    def __str__(self) -> str:
        return self.reason


@dataclass(frozen=True)
class StringFormat:
    """A named string format, checked by a regular expression or a callback."""

    name: str
    regexp: Optional[Pattern[str]] = None
    callback: Optional[FormatCallback] = None

    def check(self, value: str) -> None:
        """Raise SchemaError if ``value`` does not have this format."""
        if self.regexp is not None:
            if self.regexp.search(value) is None:
                raise SchemaError(
                    value,
                    f'JSON string doesn\'t match the format "{self.name}" '
                    f'(regular expression "{self.regexp.pattern}")',
                    "format",
                )
        elif self.callback is not None:
            self.callback(value)


SCHEMA_STRING_FORMATS: dict[str, StringFormat] = {}


def define_string_format(name: str, pattern: str) -> None:
    """Register a format checked by the regular expression ``pattern``."""
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise ValueError(
            f"format {name!r} has invalid pattern {pattern!r}: {exc}"
        ) from exc
    SCHEMA_STRING_FORMATS[name] = StringFormat(name=name, regexp=compiled)


def define_string_format_callback(name: str, callback: FormatCallback) -> None:
    """Register a format checked by ``callback``, which raises when invalid."""
    SCHEMA_STRING_FORMATS[name] = StringFormat(name=name, callback=callback)


def validate_format(name: str, value: str) -> None:
    """Check ``value`` against the registered format ``name``; unknown formats pass."""
    string_format = SCHEMA_STRING_FORMATS.get(name)
    if string_format is not None:
        string_format.check(value)


def validate_ip(ip: str) -> None:
    """Raise SchemaError unless ``ip`` is an IPv4 or IPv6 address."""
    if "%" in ip:
        raise SchemaError(ip, "Not an IP address")
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        raise SchemaError(ip, "Not an IP address") from None


def validate_ipv4(ip: str) -> None:
    """Raise SchemaError unless ``ip`` is an IPv4 address."""
    validate_ip(ip)
    if ip.count(":") >= 2:
        raise SchemaError(ip, "Not an IPv4 address (it's IPv6)")


def validate_ipv6(ip: str) -> None:
    """Raise SchemaError unless ``ip`` is an IPv6 address."""
    validate_ip(ip)
    if ip.count(":") < 2:
        raise SchemaError(ip, "Not an IPv6 address (it's IPv4)")


def define_ipv4_format() -> None:
    """Enable checking of the ``ipv4`` format."""
    define_string_format_callback("ipv4", validate_ipv4)


def define_ipv6_format() -> None:
    """Enable checking of the ``ipv6`` format."""
    define_string_format_callback("ipv6", validate_ipv6)


# This pattern catches only some suspiciously wrong-looking email addresses.
define_string_format("email", r'^[^@]+@[^@<>",\s]+$')
# Base64 and base64url, with optional padding.
define_string_format("byte", r"(^$|^[a-zA-Z0-9+/\-_]*=*$)")
define_string_format("date", r"^[0-9]{4}-(0[0-9]|10|11|12)-([0-2][0-9]|30|31)$")
define_string_format(
    "date-time",
    r"^[0-9]{4}-(0[0-9]|10|11|12)-([0-2][0-9]|30|31)T[0-9]{2}:[0-9]{2}:[0-9]{2}"
    r"(.[0-9]+)?(Z|(\+|-)[0-9]{2}:[0-9]{2})?$",
)