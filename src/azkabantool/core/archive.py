import shutil
from pathlib import Path
from typing import Union

from loguru import logger

from azkabantool.errors import DirectoryNotFound


def archive_path_for(directory_path: Union[str, Path]) -> Path:
    directory = Path(directory_path)
    return directory.parent / f"{directory.name}.zip"


def archive(directory_path: Union[str, Path]) -> Path:
    """
    Zip a collection directory into <directory>.zip next to it.

    An existing archive with the same name is replaced, never appended to.
    The archive root is the collection directory itself.
    """
    directory = Path(directory_path)
    if not directory.is_dir():
        raise DirectoryNotFound(f"Directory not found: {directory_path}")

    archive_path = archive_path_for(directory)
    if archive_path.exists():
        logger.warning(f"⚠ Archive {archive_path} already exists, overwriting")
        archive_path.unlink()

    base_name = str(archive_path.with_suffix(""))
    shutil.make_archive(base_name, "zip", root_dir=directory.parent, base_dir=directory.name)
    logger.info(f"✓ Archived {directory} to {archive_path}")
    return archive_path


def remove_archive(archive_path: Union[str, Path]):
    path = Path(archive_path)
    if path.exists():
        path.unlink()
        logger.debug(f"Removed archive {path}")
