"""Aggregate application use cases."""

from .planning import check_validation
from .users import sync_user

__all__ = [
    "check_validation",
    "sync_user",
]
