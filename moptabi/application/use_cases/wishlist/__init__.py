"""Use cases for the wishlist."""

from .create_wishlist_entry import DUPLICATE_WISHLIST_MESSAGE, create_wishlist_entry
from .manage_wishlist import (
    WISHLIST_NOT_FOUND,
    WishlistCount,
    count_wishlist,
    delete_wishlist_entry,
    list_wishlist,
    update_wishlist_entry,
)

__all__ = [
    "DUPLICATE_WISHLIST_MESSAGE",
    "WISHLIST_NOT_FOUND",
    "WishlistCount",
    "count_wishlist",
    "create_wishlist_entry",
    "delete_wishlist_entry",
    "list_wishlist",
    "update_wishlist_entry",
]
