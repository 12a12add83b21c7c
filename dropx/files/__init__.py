"""Remote file operations."""

from dropx.files.listing import FolderEntry, list_folder

__all__ = ["FolderEntry", "list_folder"]
