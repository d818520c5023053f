"""Shared building blocks for the API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from moptabi.utils import ensure_utc


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


UtcDateTime = Annotated[datetime, AfterValidator(ensure_utc)]


__all__ = ["CamelModel", "UtcDateTime"]
