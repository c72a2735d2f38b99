"""Pydantic models for room request bodies.

The tool layer speaks snake_case (``nomi_uuids``) while the Nomi API expects
camelCase (``nomiUuids``); field aliases carry that mapping.

Instances are built with ``model_construct`` so no validation runs: a
malformed value is forwarded to the API, which reports its own validation
error. Which fields were supplied is tracked by pydantic's
``model_fields_set``, so a field the caller omitted never appears in the
payload while a field explicitly set to ``None`` is sent as ``null``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class _RoomFields(BaseModel):
    """Shared behaviour for room bodies built from tool arguments."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> Self:
        """Build a body from tool arguments, keeping only the fields present."""
        provided = {name: arguments[name] for name in cls.model_fields if name in arguments}
        return cls.model_construct(_fields_set=set(provided), **provided)

    def to_payload(self) -> dict[str, Any]:
        """Return the camelCase JSON body containing only the supplied fields."""
        return {
            field.alias or name: getattr(self, name)
            for name, field in type(self).model_fields.items()
            if name in self.model_fields_set
        }


class RoomCreate(_RoomFields):
    """Body for ``POST /rooms``."""

    name: str = Field(description="Room name (100 characters max)")
    note: str = Field(description="Room note/description (1000 characters max)")
    backchanneling_enabled: bool = Field(alias="backchannelingEnabled")
    nomi_uuids: list[str] = Field(alias="nomiUuids", min_length=1, max_length=10)


class RoomUpdate(_RoomFields):
    """Partial body for ``PUT /rooms/{id}``; every field is optional."""

    name: str | None = None
    note: str | None = None
    nomi_uuids: list[str] | None = Field(default=None, alias="nomiUuids")
    backchanneling_enabled: bool | None = Field(default=None, alias="backchannelingEnabled")
