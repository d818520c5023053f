"""Use cases for trips."""

from .create_trip import PlanInput, PlanSpotInput, create_trip
from .manage_trips import (
    TRIP_NOT_FOUND,
    TripCount,
    count_trips,
    delete_trip,
    get_trip,
    list_trips,
)
from .trip_images import IMAGE_NOT_FOUND, get_trip_image_path, upload_trip_image

__all__ = [
    "IMAGE_NOT_FOUND",
    "PlanInput",
    "PlanSpotInput",
    "TRIP_NOT_FOUND",
    "TripCount",
    "count_trips",
    "create_trip",
    "delete_trip",
    "get_trip",
    "get_trip_image_path",
    "list_trips",
    "upload_trip_image",
]
