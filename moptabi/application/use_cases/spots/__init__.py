"""Use cases for spot listings."""

from .endpoint_history import EndpointHistory, EndpointLocation, get_endpoint_history
from .list_spots import (
    UnvisitedSortBy,
    VisitedSortBy,
    VisitedSpot,
    list_unvisited_spots,
    list_visited_spots,
)

__all__ = [
    "EndpointHistory",
    "EndpointLocation",
    "UnvisitedSortBy",
    "VisitedSortBy",
    "VisitedSpot",
    "get_endpoint_history",
    "list_unvisited_spots",
    "list_visited_spots",
]
