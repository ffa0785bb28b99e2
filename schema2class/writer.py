"""
Persist generated sources to an output directory.
"""

from pathlib import Path
from typing import Union

from .logging_config import get_logger

logger = get_logger(__name__)


class OutputError(Exception):
    """Raised when generated code cannot be written."""

    pass


def ensure_output_dir(path: Union[str, Path]) -> Path:
    """
    Create the output directory (and parents) if needed.

    Raises:
        OutputError: If the path exists but is not a directory, or cannot be created
    """
    directory = Path(path)
    if directory.exists():
        if not directory.is_dir():
            raise OutputError(f"Output path is not a directory: {directory}")
        return directory

    try:
        directory.mkdir(parents=True)
    except OSError as e:
        raise OutputError(f"Error creating the output directory {directory}: {e}") from e

    logger.info("Created output directory %s", directory)
    return directory


def write_source(
    output_dir: Union[str, Path], file_name: str, text: str
) -> Path:
    """
    Write one generated source file.

    Args:
        output_dir: Existing output directory
        file_name: Target file name, e.g. ``UserAccounts.java``
        text: Generated source text

    Returns:
        Path of the written file

    Raises:
        OutputError: If the file cannot be written
    """
    path = Path(output_dir) / file_name
    try:
        # newline="" keeps the line endings chosen by the generator
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise OutputError(f"Failed to write {path}: {e}") from e

    logger.debug("Wrote %s (%d bytes)", path, len(text))
    return path
