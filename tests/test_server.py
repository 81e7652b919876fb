import pytest

from oaskit.server import Server, ServerError, Servers, ServerVariable


def test_server_param_names():
    server = Server(url="http://{x}.{y}.example.com")
    assert server.parameter_names() == ["x", "y"]


def test_server_param_names_missing_brace():
    with pytest.raises(ServerError, match="missing '}'"):
        Server(url="http://{x.example.com").parameter_names()


WITH_PATH = "http://{arg0}.{arg1}.example.com/a/{arg3}-version/{arg4}c{arg5}"


@pytest.mark.parametrize(
    "raw_url,expected",
    [
        ("http://x.example.com/a/b", None),
        ("http://x.y.example.com/", None),
        ("http://x.y.example.com/a/", None),
        ("http://x.y.example.com/a/c", None),
        ("http://baddomain.com/.example.com/a/1.0.0-version/c/d", None),
        ("http://baddomain.com/.example.com/a/1.0.0/2/2.0.0-version/c", None),
        ("http://x.y.example.com/a/b-version/prefixedc", (["x", "y", "b", "prefixed", ""], "/")),
        ("http://x.y.example.com/a/b-version/c", (["x", "y", "b", "", ""], "/")),
        ("http://x.y.example.com/a/b-version/c/", (["x", "y", "b", "", ""], "/")),
        ("http://x.y.example.com/a/b-version/c/d", (["x", "y", "b", "", ""], "/d")),
        (
            "http://domain0.domain1.example.com/a/b-version/c/d",
            (["domain0", "domain1", "b", "", ""], "/d"),
        ),
        (
            "http://domain0.domain1.example.com/a/1.0.0-version/c/d",
            (["domain0", "domain1", "1.0.0", "", ""], "/d"),
        ),
    ],
)
def test_server_param_values_with_path(raw_url, expected):
    assert Server(url=WITH_PATH).match_raw_url(raw_url) == expected


def test_server_param_values_no_path():
    server = Server(url="https://{arg0}.{arg1}.example.com/")
    assert server.match_raw_url("https://domain0.domain1.example.com/") == (
        ["domain0", "domain1"],
        "/",
    )


def test_server_validation_without_url():
    with pytest.raises(ServerError) as info:
        Server().validate()
    assert str(info.value) == "value of url must be a non-empty string"


def test_server_validation_with_url():
    assert Server(url="http://my.cool.website").validate() is None


def test_server_validation_mismatched_braces():
    with pytest.raises(ServerError, match="mismatched"):
        Server(url="http://{x.example.com").validate()


def test_server_validation_undeclared_variables():
    with pytest.raises(ServerError, match="undeclared variables"):
        Server(url="http://{x}.example.com").validate()
    server = Server(url="http://{x}.example.com", variables={"y": ServerVariable(default="a")})
    with pytest.raises(ServerError, match="undeclared variables"):
        server.validate()


def test_server_validation_variable_default_required():
    server = Server(url="http://{x}.example.com", variables={"x": ServerVariable(description="d")})
    with pytest.raises(ServerError) as info:
        server.validate()
    assert str(info.value) == 'field default is required in {"description":"d"}'


def test_server_validation_with_variables():
    server = Server(url="http://{x}.example.com", variables={"x": ServerVariable(default="api")})
    assert server.validate() is None


def test_servers_match_url():
    first = Server(url="https://api.example.com/v1")
    second = Server(url="https://{env}.example.com/v2")
    servers = Servers([first, second])
    assert servers.match_url("https://staging.example.com/v2/pets?limit=3") == (
        second,
        ["staging"],
        "/pets",
    )
    assert servers.match_url("https://api.example.com/v1/pets") == (first, [], "/pets")
    assert servers.match_url("https://other.test/") is None


def test_servers_validate_stops_on_error():
    servers = Servers([Server(url="http://ok.example.com"), Server()])
    with pytest.raises(ServerError, match="non-empty"):
        servers.validate()


def test_server_dict_round_trip():
    data = {
        "url": "https://{env}.example.com",
        "description": "main",
        "variables": {"env": {"default": "prod", "enum": ["prod", "dev"]}},
        "x-note": True,
    }
    server = Server.from_dict(data)
    assert server.variables["env"].enum == ["prod", "dev"]
    assert server.to_dict() == data
    assert Server(url="/api").to_dict() == {"url": "/api"}