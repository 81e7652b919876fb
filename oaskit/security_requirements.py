"""Security requirement objects."""

from __future__ import annotations

import json


class SecurityRequirement(dict):
    """Maps security scheme names to the scopes they require."""

    def authenticate(self, provider: str, *args: str) -> "SecurityRequirement":
        """Require ``provider`` with the given scopes; return self."""
        self[provider] = list(args)
        return self

    def validate(self) -> None:
        """Raise TypeError unless every provider maps to a list of scope strings."""
        for provider, scopes in self.items():
            if not isinstance(scopes, list) or not all(isinstance(s, str) for s in scopes):
                raise TypeError(f"scopes of {provider!r} must be a list of strings")

    def to_json(self) -> str:
        """Encode as compact JSON."""
        return json.dumps(self, separators=(",", ":"), sort_keys=True)


class SecurityRequirements(list):
    """A list of alternative security requirements."""

    def with_requirement(self, requirement: SecurityRequirement) -> "SecurityRequirements":
        """Append ``requirement``; return self."""
        self.append(requirement)
        return self

    def validate(self) -> None:
        """Validate every requirement in order."""
        for requirement in self:
            requirement.validate()

    def to_json(self) -> str:
        """Encode as compact JSON."""
        return json.dumps(self, separators=(",", ":"), sort_keys=True)