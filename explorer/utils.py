import os
from urllib.parse import quote


FOLDER_ICON = "fa-regular fa-folder"
FILE_ICON = "fa-regular fa-file"


def display_name(name):
    """Convert an entry name to text, replacing bytes that are not valid UTF-8"""
    return os.fsencode(name).decode("utf-8", errors="replace")


def get_file_icon(entry):
    """Get the Font Awesome icon class for an entry"""
    if entry.is_dir:
        return FOLDER_ICON
    return FILE_ICON


def file_link(path, name):
    """Build the /files/ link of a child entry of the directory at path"""
    parts = [part for part in (path.strip("/"), name.lstrip("/")) if part]
    return "/files/" + quote(os.fsencode("/".join(parts)), safe="/")
