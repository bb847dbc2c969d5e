"""Choose between a directory listing and a single item for a request path"""

from dataclasses import dataclass
from typing import List, Union

from explorer.errors import PathNotFound
from explorer.listing import list_entries
from explorer.paths import FileSystemEntry, resolve


@dataclass(frozen=True)
class ListingView:
    path: str
    entries: List[FileSystemEntry]


@dataclass(frozen=True)
class ItemView:
    path: str
    entry: FileSystemEntry


View = Union[ListingView, ItemView]


def select_view(path, root, confine=True) -> View:
    """Resolve path and wrap it as a listing or an item.

    File contents are not read here; that happens when the item is rendered.
    """
    entry = resolve(path, root, confine=confine)

    if not entry.is_dir:
        return ItemView(path=path, entry=entry)

    entries = list_entries(entry)
    if entries is None:
        raise PathNotFound(path)

    return ListingView(path=path, entries=entries)
