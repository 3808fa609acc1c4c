"""
Pure watchlist operations.

Each function takes a Watchlist and returns a new one; nothing is mutated
in place. Persisting the result is the caller's job.
"""

import uuid
from dataclasses import replace
from typing import Callable, Optional

from trade_risk.config.defaults import WatchlistParams
from trade_risk.errors import InvalidInputError
from trade_risk.models.fields import parse_enum
from trade_risk.models.watchlist import ColorFlag, Watchlist, WatchlistFolder, WatchlistStock
from trade_risk.utils.time import now_ms
from trade_risk.validation.guards import require_number, validate_ticker

_DEFAULTS = WatchlistParams()


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def create_default_watchlist(created_at: Optional[int] = None,
                             folder_id: str = _DEFAULTS.default_folder_id,
                             folder_name: str = _DEFAULTS.default_folder_name) -> Watchlist:
    """Watchlist with a single empty folder."""
    folder = WatchlistFolder(
        id=folder_id,
        name=folder_name,
        created_at=now_ms() if created_at is None else created_at,
        order=0,
    )
    return Watchlist(folders=(folder,))


def sorted_folders(watchlist: Watchlist) -> list[WatchlistFolder]:
    """Folders in display order. Ties keep their stored order."""
    return sorted(watchlist.folders, key=lambda folder: folder.order)


def find_folder(watchlist: Watchlist, folder_id: str) -> Optional[WatchlistFolder]:
    for folder in watchlist.folders:
        if folder.id == folder_id:
            return folder
    return None


def _require_folder(watchlist: Watchlist, folder_id: str) -> WatchlistFolder:
    folder = find_folder(watchlist, folder_id)
    if folder is None:
        raise InvalidInputError(
            f"Unknown watchlist folder {folder_id!r}",
            field="folder_id",
            value=folder_id,
        )
    return folder


def _map_folder(watchlist: Watchlist, folder_id: str,
                update: Callable[[WatchlistFolder], WatchlistFolder]) -> Watchlist:
    _require_folder(watchlist, folder_id)
    return Watchlist(folders=tuple(
        update(folder) if folder.id == folder_id else folder
        for folder in watchlist.folders
    ))


def _map_stock(watchlist: Watchlist, folder_id: str, stock_id: str,
               update: Callable[[WatchlistStock], WatchlistStock]) -> Watchlist:
    def update_folder(folder: WatchlistFolder) -> WatchlistFolder:
        if folder.get_stock(stock_id) is None:
            raise InvalidInputError(
                f"Unknown stock {stock_id!r} in folder {folder_id!r}",
                field="stock_id",
                value=stock_id,
            )
        return replace(folder, stocks=tuple(
            update(stock) if stock.id == stock_id else stock
            for stock in folder.stocks
        ))

    return _map_folder(watchlist, folder_id, update_folder)


def add_folder(watchlist: Watchlist, name: str,
               folder_id: Optional[str] = None,
               created_at: Optional[int] = None) -> Watchlist:
    """Append a new empty folder after the existing ones."""
    folder_id = folder_id or _new_id("folder")
    if find_folder(watchlist, folder_id) is not None:
        raise InvalidInputError(
            f"Folder {folder_id!r} already exists",
            field="folder_id",
            value=folder_id,
        )

    next_order = max((folder.order for folder in watchlist.folders), default=-1) + 1
    folder = WatchlistFolder(
        id=folder_id,
        name=name,
        created_at=now_ms() if created_at is None else created_at,
        order=next_order,
    )
    return Watchlist(folders=watchlist.folders + (folder,))


def remove_folder(watchlist: Watchlist, folder_id: str) -> Watchlist:
    """Drop a folder and its stocks. Unknown ids leave the watchlist unchanged."""
    return Watchlist(folders=tuple(f for f in watchlist.folders if f.id != folder_id))


def rename_folder(watchlist: Watchlist, folder_id: str, name: str) -> Watchlist:
    return _map_folder(watchlist, folder_id, lambda folder: replace(folder, name=name))


def reorder_folders(watchlist: Watchlist, from_index: int, to_index: int) -> Watchlist:
    """
    Move the folder at from_index (in display order) to to_index.

    Orders are renumbered 0..n-1 afterwards.
    """
    folders = sorted_folders(watchlist)
    for index, label in ((from_index, "from_index"), (to_index, "to_index")):
        if not 0 <= index < len(folders):
            raise InvalidInputError(
                f"{label} {index} out of range for {len(folders)} folders",
                field=label,
                value=index,
            )

    moved = folders.pop(from_index)
    folders.insert(to_index, moved)
    return Watchlist(folders=tuple(
        replace(folder, order=position) for position, folder in enumerate(folders)
    ))


def add_stock(watchlist: Watchlist, folder_id: str, symbol: str, name: str,
              price: float, change: float, change_percent: float,
              color_flag: ColorFlag = ColorFlag.NONE,
              notes: Optional[str] = None,
              stock_id: Optional[str] = None,
              added_at: Optional[int] = None) -> Watchlist:
    """
    Add a stock to a folder, assigning its id and timestamp.

    Raises:
        ValidationError: If the symbol or color flag is malformed
        InvalidInputError: If the folder is unknown or the id already exists in it
    """
    validate_ticker(symbol)
    stock = WatchlistStock(
        id=stock_id or _new_id("stock"),
        symbol=symbol,
        name=name,
        price=require_number(price, "price"),
        change=require_number(change, "change"),
        change_percent=require_number(change_percent, "change_percent"),
        color_flag=color_flag,
        added_at=now_ms() if added_at is None else added_at,
        notes=notes,
    )
    return _map_folder(watchlist, folder_id,
                       lambda folder: replace(folder, stocks=folder.stocks + (stock,)))


def remove_stock(watchlist: Watchlist, folder_id: str, stock_id: str) -> Watchlist:
    return _map_folder(watchlist, folder_id, lambda folder: replace(
        folder, stocks=tuple(s for s in folder.stocks if s.id != stock_id)
    ))


def move_stock(watchlist: Watchlist, stock_id: str,
               from_folder_id: str, to_folder_id: str) -> Watchlist:
    """
    Move a stock between folders.

    A stock missing from the source folder leaves the watchlist unchanged.
    """
    source = _require_folder(watchlist, from_folder_id)
    _require_folder(watchlist, to_folder_id)

    stock = source.get_stock(stock_id)
    if stock is None or from_folder_id == to_folder_id:
        return watchlist

    folders = []
    for folder in watchlist.folders:
        if folder.id == from_folder_id:
            folder = replace(folder, stocks=tuple(s for s in folder.stocks if s.id != stock_id))
        elif folder.id == to_folder_id:
            # WatchlistFolder rejects a duplicate id here
            folder = replace(folder, stocks=folder.stocks + (stock,))
        folders.append(folder)
    return Watchlist(folders=tuple(folders))


def update_stock_flag(watchlist: Watchlist, folder_id: str, stock_id: str,
                      color_flag: ColorFlag) -> Watchlist:
    flag = parse_enum(ColorFlag, color_flag, "colorFlag")
    return _map_stock(watchlist, folder_id, stock_id,
                      lambda stock: replace(stock, color_flag=flag))


def update_stock_notes(watchlist: Watchlist, folder_id: str, stock_id: str,
                       notes: Optional[str]) -> Watchlist:
    return _map_stock(watchlist, folder_id, stock_id,
                      lambda stock: replace(stock, notes=notes))


def update_stock_quote(watchlist: Watchlist, folder_id: str, stock_id: str,
                       price: float, change: float, change_percent: float) -> Watchlist:
    """Refresh the quote fields of a saved stock."""
    price = require_number(price, "price")
    change = require_number(change, "change")
    change_percent = require_number(change_percent, "change_percent")
    return _map_stock(watchlist, folder_id, stock_id, lambda stock: replace(
        stock, price=price, change=change, change_percent=change_percent
    ))
