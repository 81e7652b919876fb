# oaskit

Plain-Python building blocks for OpenAPI 3 documents. The package has no
dependencies outside the standard library.

| Module | What it holds |
| --- | --- |
| `oaskit.formats` | A registry of named string formats and the checks behind them |
| `oaskit.settings` | Options for schema validation (fail-fast, multi-error, request/response mode) |
| `oaskit.serialization` | Parameter serialization styles and the explode flag |
| `oaskit.security_requirements` | Security requirement objects |
| `oaskit.security_scheme` | Security schemes and OAuth flows, with validation |
| `oaskit.server` | Server URL templates: parameter names, URL matching, validation |
| `oaskit.tag` | Tag objects and lookup by name |

## Installation

```
pip install oaskit
```

## String formats

`SCHEMA_STRING_FORMATS` maps format names to `StringFormat` entries. Each entry
is checked by a regular expression or by a callback. `email`, `byte`, `date` and
`date-time` are registered when the module is imported. `ipv4` and `ipv6` are
opt-in through `define_ipv4_format()` and `define_ipv6_format()`.
`validate_format(name, value)` raises `SchemaError` when the value does not
match. An unknown format name passes.

```python
from oaskit.formats import (
    SchemaError, define_ipv4_format, define_string_format, validate_format,
)

validate_format("date", "2021-04-01")

try:
    validate_format("date", "April 1st")
except SchemaError as exc:
    print(exc)

define_ipv4_format()
validate_format("ipv4", "192.168.0.1")

define_string_format("hex", r"^[0-9a-f]+$")    # ValueError on a bad pattern
```

`validate_ip`, `validate_ipv4` and `validate_ipv6` can also be called on their
own. `define_string_format_callback(name, callback)` registers any function
that raises when a value is invalid.

## Validation settings

```python
from oaskit.settings import fail_fast, new_schema_validation_settings, visit_as_request

settings = new_schema_validation_settings(fail_fast(), visit_as_request())
print(settings.fail_fast, settings.as_request, settings.as_response)   # True True False
```

`visit_as_request()` and `visit_as_response()` exclude each other, so the last
one applied wins. `multi_errors()` sets `multi_error`.

## Serialization methods

`SerializationStyle` lists the styles `simple`, `label`, `matrix`, `form`,
`spaceDelimited`, `pipeDelimited` and `deepObject`. `SerializationMethod(style,
explode=False)` pairs a style with the explode flag.

## Security requirements

```python
from oaskit.security_requirements import SecurityRequirement, SecurityRequirements

reqs = SecurityRequirements().with_requirement(
    SecurityRequirement().authenticate("petstore_auth", "read:pets")
)
print(reqs.to_json())    # [{"petstore_auth":["read:pets"]}]
```

`authenticate` with no scopes gives an empty list. `validate()` raises
`TypeError` unless every provider maps to a list of strings.

## Security schemes

```python
from oaskit.security_scheme import SecurityScheme, new_jwt_security_scheme

scheme = SecurityScheme.from_json('{"type": "http", "scheme": "basic"}')
scheme.validate()                 # raises SecuritySchemeError when invalid

print(new_jwt_security_scheme().to_json())
# {"bearerFormat":"JWT","scheme":"bearer","type":"http"}
```

`SecurityScheme.validate()` applies these rules:

- `type` must be `apiKey`, `http`, `oauth2` or `openIdConnect`.
- For `http`, `scheme` must be `basic`, `bearer`, `digest` or `negotiate`.
- For `apiKey`, `in` must be `query`, `header` or `cookie`, and `name` is required.
- `bearerFormat` is only allowed with the `bearer` scheme.
- `oauth2` needs `flows`. Other types must not have `flows`.
- `openIdConnect` needs `openIdConnectUrl`.

`OAuthFlows.validate()` checks the first flow that is defined, taking them in
this order: implicit, password, clientCredentials, authorizationCode.

`new_csrf_security_scheme()` and `new_oidc_security_scheme(url)` build common
schemes. `SecuritySchemes` is a dict of names to schemes or reference strings.
Its `json_lookup(token)` returns the scheme, or `{"$ref": ...}` for a
reference, and raises `LookupError` for an unknown name.

## Servers

```python
from oaskit.server import Server, Servers

server = Server(url="http://{env}.example.com/api")
print(server.parameter_names())                              # ['env']
print(server.match_raw_url("http://prod.example.com/api/pets"))
# (['prod'], '/pets')

servers = Servers([server])
print(servers.match_url("http://prod.example.com/api/pets?limit=1"))
# (Server(...), ['prod'], '/pets')
```

`match_raw_url` and `match_url` return `None` when nothing matches. `validate()`
raises `ServerError` in these cases:

- the URL is empty;
- the braces are unbalanced;
- the declared variables do not match those in the URL;
- a variable has no default.

## Tags

```python
from oaskit.tag import Tag, Tags

tags = Tags([Tag(name="pet", description="Everything about pets")])
print(tags.get("pet").description)
print(Tag.from_dict({"name": "store", "x-order": 2}).to_dict())
# {'name': 'store', 'x-order': 2}
```

## Document forms

`Tag`, `OAuthFlow`, `OAuthFlows`, `SecurityScheme`, `ServerVariable` and
`Server` all provide `to_dict()` and `from_dict()`. Empty fields are left out,
and unknown keys are kept in `extensions`.

## What the package does not do

oaskit does not:

- load or parse whole OpenAPI documents from files or URLs;
- resolve `$ref` references;
- validate values against full schemas.

The settings in `oaskit.settings` only describe validation options. Nothing in
the package runs a schema validator with them.

## Running the tests

```
pip install -e ".[test]"
pytest
```