"""OpenAPI 3 building blocks: string formats, validation settings, serialization styles,
security requirements and schemes, servers and tags."""

__version__ = "0.1.0"

__all__ = [
    "formats",
    "settings",
    "serialization",
    "security_requirements",
    "security_scheme",
    "server",
    "tag",
]