"""Data models.

Architecture:
    ``Page`` is a frozen dataclass: a pure record of one server response.
    Item payloads are whatever type the caller decodes into (pydantic models,
    plain dicts, scalars) via ``pydantic.TypeAdapter``.
"""

from .page import Page

__all__ = ["Page"]
