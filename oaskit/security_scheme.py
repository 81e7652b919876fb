"""Security scheme objects and their OAuth flows."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class SecuritySchemeError(ValueError):
    """A security scheme or OAuth flow is not valid."""


def _extensions(data: dict[str, Any], known: set[str]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in known}


class OAuthFlowType(Enum):
    """The kind of OAuth flow, which decides the required URLs."""

    IMPLICIT = "implicit"
    PASSWORD = "password"
    CLIENT_CREDENTIALS = "clientCredentials"
    AUTHORIZATION_CODE = "authorizationCode"


@dataclass
class OAuthFlow:
    """Configuration of a single OAuth flow."""

    authorization_url: str = ""
    token_url: str = ""
    refresh_url: str = ""
    scopes: Optional[dict[str, str]] = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def validate(self, flow_type: OAuthFlowType) -> None:
        """Raise SecuritySchemeError if the flow lacks what ``flow_type`` needs."""
        if flow_type in (OAuthFlowType.AUTHORIZATION_CODE, OAuthFlowType.IMPLICIT) and not self.authorization_url:
            raise SecuritySchemeError(
                "an OAuth flow is missing 'authorizationUrl in authorizationCode or implicit '"
            )
        if flow_type is not OAuthFlowType.IMPLICIT and not self.token_url:
            raise SecuritySchemeError("an OAuth flow is missing 'tokenUrl in not implicit'")
        if self.scopes is None:
            raise SecuritySchemeError("an OAuth flow is missing 'scopes'")

    def to_dict(self) -> dict[str, Any]:
        """Return the document form, leaving out empty URLs."""
        data: dict[str, Any] = {
            key: value
            for key, value in (
                ("authorizationUrl", self.authorization_url),
                ("tokenUrl", self.token_url),
                ("refreshUrl", self.refresh_url),
            )
            if value
        }
        data["scopes"] = self.scopes
        data.update(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OAuthFlow":
        """Build a flow from its document form."""
        scopes = data.get("scopes")
        return cls(
            authorization_url=data.get("authorizationUrl", ""),
            token_url=data.get("tokenUrl", ""),
            refresh_url=data.get("refreshUrl", ""),
            scopes=dict(scopes) if scopes is not None else None,
            extensions=_extensions(data, {"authorizationUrl", "tokenUrl", "refreshUrl", "scopes"}),
        )


@dataclass
class OAuthFlows:
    """The OAuth flows a security scheme supports."""

    implicit: Optional[OAuthFlow] = None
    password: Optional[OAuthFlow] = None
    client_credentials: Optional[OAuthFlow] = None
    authorization_code: Optional[OAuthFlow] = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def _flows(self) -> list[tuple[OAuthFlowType, Optional[OAuthFlow]]]:
        return [
            (OAuthFlowType.IMPLICIT, self.implicit),
            (OAuthFlowType.PASSWORD, self.password),
            (OAuthFlowType.CLIENT_CREDENTIALS, self.client_credentials),
            (OAuthFlowType.AUTHORIZATION_CODE, self.authorization_code),
        ]

    def validate(self) -> None:
        """Validate the first defined flow; raise if none is defined."""
        for flow_type, flow in self._flows():
            if flow is not None:
                flow.validate(flow_type)
                return
        raise SecuritySchemeError("no OAuth flow is defined")

    def to_dict(self) -> dict[str, Any]:
        """Return the document form, leaving out undefined flows."""
        data = {kind.value: flow.to_dict() for kind, flow in self._flows() if flow is not None}
        data.update(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OAuthFlows":
        """Build the flows from their document form."""
        flows = {
            kind: OAuthFlow.from_dict(data[kind.value])
            for kind in OAuthFlowType
            if data.get(kind.value) is not None
        }
        return cls(
            implicit=flows.get(OAuthFlowType.IMPLICIT),
            password=flows.get(OAuthFlowType.PASSWORD),
            client_credentials=flows.get(OAuthFlowType.CLIENT_CREDENTIALS),
            authorization_code=flows.get(OAuthFlowType.AUTHORIZATION_CODE),
            extensions=_extensions(data, {kind.value for kind in OAuthFlowType}),
        )


_SCHEME_KEYS = {
    "type": "type",
    "description": "description",
    "name": "name",
    "in": "in_",
    "scheme": "scheme",
    "bearerFormat": "bearer_format",
    "openIdConnectUrl": "open_id_connect_url",
}


@dataclass
class SecurityScheme:
    """A security scheme usable by operations."""

    type: str = ""
    description: str = ""
    name: str = ""
    in_: str = ""
    scheme: str = ""
    bearer_format: str = ""
    flows: Optional[OAuthFlows] = None
    open_id_connect_url: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def validate(self) -> None:
        """Raise SecuritySchemeError if the scheme is inconsistent."""
        kind = json.dumps(self.type)
        has_in = self.type == "apiKey"
        has_bearer_format = False
        has_flow = self.type == "oauth2"
        if self.type == "http":
            if self.scheme == "bearer":
                has_bearer_format = True
            elif self.scheme not in ("basic", "negotiate", "digest"):
                raise SecuritySchemeError(
                    f"security scheme of type 'http' has invalid 'scheme' value {json.dumps(self.scheme)}"
                )
        elif self.type == "openIdConnect":
            if not self.open_id_connect_url:
                raise SecuritySchemeError(
                    f"no OIDC URL found for openIdConnect security scheme {json.dumps(self.name)}"
                )
        elif not (has_in or has_flow):
            raise SecuritySchemeError(f"security scheme 'type' can't be {kind}")

        if has_in:
            if self.in_ not in ("query", "header", "cookie"):
                raise SecuritySchemeError(
                    "security scheme of type 'apiKey' should have 'in'. "
                    f"It can be 'query', 'header' or 'cookie', not {json.dumps(self.in_)}"
                )
            if not self.name:
                raise SecuritySchemeError("security scheme of type 'apiKey' should have 'name'")
        elif self.in_:
            raise SecuritySchemeError(f"security scheme of type {kind} can't have 'in'")
        elif self.name:
            raise SecuritySchemeError("security scheme of type 'apiKey' can't have 'name'")

        if not has_bearer_format and self.bearer_format:
            raise SecuritySchemeError(f"security scheme of type {kind} can't have 'bearerFormat'")

        if has_flow:
            if self.flows is None:
                raise SecuritySchemeError(f"security scheme of type {kind} should have 'flows'")
            try:
                self.flows.validate()
            except SecuritySchemeError as exc:
                raise SecuritySchemeError(f"security scheme 'flow' is invalid: {exc}") from exc
        elif self.flows is not None:
            raise SecuritySchemeError(f"security scheme of type {kind} can't have 'flows'")

    def to_dict(self) -> dict[str, Any]:
        """Return the document form, leaving out empty fields."""
        data: dict[str, Any] = {
            key: getattr(self, attr) for key, attr in _SCHEME_KEYS.items() if getattr(self, attr)
        }
        if self.flows is not None:
            data["flows"] = self.flows.to_dict()
        data.update(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SecurityScheme":
        """Build a scheme from its document form."""
        flows = data.get("flows")
        return cls(
            **{attr: data.get(key) or "" for key, attr in _SCHEME_KEYS.items()},
            flows=OAuthFlows.from_dict(flows) if flows is not None else None,
            extensions=_extensions(data, set(_SCHEME_KEYS) | {"flows"}),
        )

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "SecurityScheme":
        """Decode a scheme from JSON text."""
        return cls.from_dict(json.loads(text))

    def to_json(self) -> str:
        """Encode as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"), sort_keys=True)


class SecuritySchemes(dict):
    """Maps names to security schemes or to reference strings."""

    def json_lookup(self, token: str) -> Union[SecurityScheme, dict[str, str]]:
        """Resolve one JSON pointer token; a reference comes back as {"$ref": ...}."""
        value = self.get(token)
        if value is None:
            raise LookupError(f"object has no field {json.dumps(token)}")
        if isinstance(value, str):
            return {"$ref": value}
        return value


def new_csrf_security_scheme() -> SecurityScheme:
    """An API key scheme carried in the X-XSRF-TOKEN header."""
    return SecurityScheme(type="apiKey", in_="header", name="X-XSRF-TOKEN")


def new_oidc_security_scheme(oidc_url: str) -> SecurityScheme:
    """An OpenID Connect scheme discovered at ``oidc_url``."""
    return SecurityScheme(type="openIdConnect", open_id_connect_url=oidc_url)


def new_jwt_security_scheme() -> SecurityScheme:
    """An HTTP bearer scheme carrying JWTs."""
    return SecurityScheme(type="http", scheme="bearer", bearer_format="JWT")