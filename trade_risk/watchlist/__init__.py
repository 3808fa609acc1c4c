"""
Watchlist operations module.

Pure folder and stock operations over immutable Watchlist values.
"""

from .operations import (
    add_folder,
    add_stock,
    create_default_watchlist,
    find_folder,
    move_stock,
    remove_folder,
    remove_stock,
    rename_folder,
    reorder_folders,
    sorted_folders,
    update_stock_flag,
    update_stock_notes,
    update_stock_quote,
)

__all__ = [
    "add_folder",
    "add_stock",
    "create_default_watchlist",
    "find_folder",
    "move_stock",
    "remove_folder",
    "remove_stock",
    "rename_folder",
    "reorder_folders",
    "sorted_folders",
    "update_stock_flag",
    "update_stock_notes",
    "update_stock_quote",
]
