[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oaskit"
version = "0.1.0"
description = "OpenAPI 3 building blocks: string formats, validation settings, security schemes, servers and tags"
requires-python = ">=3.10"
dependencies = []
keywords = ["openapi", "openapi3", "swagger", "security-scheme", "oauth2", "server-url", "string-format"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oaskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
