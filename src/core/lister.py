import os
import logging
from typing import List

from src.core.models import DirectoryEntry

logger = logging.getLogger(__name__)


def list_entries(directory: str) -> List[DirectoryEntry]:
    """
    List the immediate entries of a directory, in listing order.
    Raises OSError if the directory is missing or unreadable.
    """
    logger.info(f"Listing entries in {directory}")
    entries = []
    with os.scandir(directory) as it:
        for dirent in it:
            entries.append(DirectoryEntry(
                name=dirent.name,
                path=dirent.path,
                is_file=dirent.is_file(follow_symlinks=False),
                is_dir=dirent.is_dir(follow_symlinks=False),
                is_symlink=dirent.is_symlink(),
            ))
    logger.info(f"Found {len(entries)} entries in {directory}")
    return entries


def filter_csv_entries(entries: List[DirectoryEntry]) -> List[DirectoryEntry]:
    """Keep regular files whose extension, lower-cased, is .csv."""
    return [
        entry for entry in entries
        if entry.is_file and os.path.splitext(entry.name)[1].lower() == ".csv"
    ]
