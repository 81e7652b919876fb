"""Server objects and matching of URLs against server templates."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional


class ServerError(ValueError):
    """A server or server variable is not valid."""


@dataclass
class ServerVariable:
    """A variable substituted into a server URL template."""

    enum: list[str] = field(default_factory=list)
    default: str = ""
    description: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def validate(self) -> None:
        """Raise ServerError if the variable has no default."""
        if not self.default:
            encoded = json.dumps(self.to_dict(), separators=(",", ":"), sort_keys=True)
            raise ServerError(f"field default is required in {encoded}")

    def to_dict(self) -> dict[str, Any]:
        """Return the document form, leaving out empty fields."""
        data = {
            key: value
            for key, value in (
                ("enum", self.enum),
                ("default", self.default),
                ("description", self.description),
            )
            if value
        }
        data.update(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServerVariable":
        """Build a variable from its document form."""
        known = {"enum", "default", "description"}
        return cls(
            enum=list(data.get("enum") or []),
            default=data.get("default") or "",
            description=data.get("description") or "",
            extensions={k: v for k, v in data.items() if k not in known},
        )


@dataclass
class Server:
    """A server an API is reachable at; its URL may hold {variables}."""

    url: str = ""
    description: str = ""
    variables: dict[str, ServerVariable] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def parameter_names(self) -> list[str]:
        """Return the variable names in the URL template, in order."""
        names: list[str] = []
        _, brace, rest = self.url.partition("{")
        while brace:
            name, closing, after = rest.partition("}")
            if not closing:
                raise ServerError("missing '}'")
            names.append(name.strip())
            _, brace, rest = after.partition("{")
        return names

    def match_raw_url(self, raw_url: str) -> Optional[tuple[list[str], str]]:
        """Match ``raw_url`` against the template.

        Returns the variable values and the remaining path, or None.
        """
        pattern, remaining = self.url, raw_url
        params: list[str] = []
        while pattern and pattern != "/":
            char = pattern[0]
            if char == "{":
                end = pattern.find("}")
                if end < 0:
                    return None
                pattern = pattern[end + 1 :]
                stops = [remaining.find(c) for c in ("/", pattern[:1]) if c]
                stops = [i for i in stops if i >= 0]
                cut = min(stops) if stops else len(remaining)
                params.append(remaining[:cut])
                remaining = remaining[cut:]
                continue
            if not remaining.startswith(char):
                return None
            pattern, remaining = pattern[1:], remaining[1:]
        remaining = remaining or "/"
        if not remaining.startswith("/"):
            return None
        return params, remaining

    def validate(self) -> None:
        """Raise ServerError if the URL or its variables are inconsistent."""
        if not self.url:
            raise ServerError("value of url must be a non-empty string")
        opening = self.url.count("{")
        if opening != self.url.count("}"):
            raise ServerError("server URL has mismatched { and }")
        if opening != len(self.variables):
            raise ServerError("server has undeclared variables")
        for name, variable in self.variables.items():
            if f"{{{name}}}" not in self.url:
                raise ServerError("server has undeclared variables")
            variable.validate()

    def to_dict(self) -> dict[str, Any]:
        """Return the document form."""
        data: dict[str, Any] = {"url": self.url}
        if self.description:
            data["description"] = self.description
        if self.variables:
            data["variables"] = {k: v.to_dict() for k, v in self.variables.items()}
        data.update(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Server":
        """Build a server from its document form."""
        known = {"url", "description", "variables"}
        return cls(
            url=data.get("url") or "",
            description=data.get("description") or "",
            variables={
                k: ServerVariable.from_dict(v) for k, v in (data.get("variables") or {}).items()
            },
            extensions={k: v for k, v in data.items() if k not in known},
        )


class Servers(list):
    """A list of servers."""

    def validate(self) -> None:
        """Validate every server in order."""
        for server in self:
            server.validate()

    def match_url(self, url: str) -> Optional[tuple[Server, list[str], str]]:
        """Find the first server matching ``url`` (query ignored).

        Returns the server, its variable values and the remaining path, or None.
        """
        raw_url = url.split("?", 1)[0]
        for server in self:
            match = server.match_raw_url(raw_url)
            if match is not None:
                return server, *match
        return None