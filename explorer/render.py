"""
HTML rendering for the file explorer.

Every producer returns ``Markup`` so fragments can be nested into each other
without being escaped twice. Nothing here touches the filesystem except
``render_item``, which reads the file it shows.
"""

import os

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup

from explorer.assets import AssetConfig
from explorer.listing import DEFAULT_MAX_READ_BYTES, read_content
from explorer.utils import display_name, file_link, get_file_icon, FILE_ICON, FOLDER_ICON
from explorer.views import ItemView, ListingView

BINARY_PLACEHOLDER = "Binary..."
DEFAULT_TITLE = "File Explorer"

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=True,
    undefined=StrictUndefined,
)

_page = _env.get_template("page.html")
_listing = _env.get_template("listing.html")
_editor = _env.get_template("editor.html")
_item = _env.get_template("item.html")
_settings = _env.get_template("settings.html")


def render_page(content, assets=None, title=DEFAULT_TITLE):
    """Wrap content in the page shell (asset loaders, sidebar and body)"""
    return Markup(_page.render(content=content, assets=assets or AssetConfig(), title=title))


def render_listing(path, entries):
    """Render a directory heading followed by one link per child entry"""
    items = [
        {
            "name": display_name(entry.name),
            "href": file_link(path, entry.name),
            "icon": get_file_icon(entry),
        }
        for entry in entries
    ]
    heading = "/" + path.strip("/")
    return Markup(_listing.render(heading=heading, items=items, folder_icon=FOLDER_ICON))


def render_editor(text):
    """Render text inside the element the Monaco editor is created over"""
    return Markup(_editor.render(text=text))


def render_item(entry, max_bytes=DEFAULT_MAX_READ_BYTES):
    """Render a file heading and its content, or the binary placeholder"""
    content = read_content(entry, max_bytes)
    if content is None:
        content = BINARY_PLACEHOLDER
    return Markup(
        _item.render(
            name=display_name(entry.name),
            editor=render_editor(content),
            file_icon=FILE_ICON,
        )
    )


def render_view(view, max_bytes=DEFAULT_MAX_READ_BYTES):
    """Render either case of a selected view"""
    if isinstance(view, ListingView):
        return render_listing(view.path, view.entries)
    if isinstance(view, ItemView):
        return render_item(view.entry, max_bytes)
    raise TypeError(f"Unknown view type: {type(view).__name__}")


def render_settings(settings):
    """Render the settings page content from (label, value) pairs"""
    return Markup(_settings.render(settings=list(settings)))
