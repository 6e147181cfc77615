"""Snippets file access.

TIER 1: May import from core only.
"""

from pathlib import Path

from core.errors import FileOpenError, FileReadError, FileWriteError
from lib.logger import get_logger

logger = get_logger("storage")


def read_snippets_file(path: str) -> str | None:
    """Read a snippets file.

    Args:
        path: File path.

    Returns:
        File content, or None if the file does not exist.

    Raises:
        FileReadError: If the file exists but cannot be read or decoded.
    """
    try:
        # utf-8-sig drops a leading BOM some editors write
        content = Path(path).read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        logger.info("No snippets file at %s", path)
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError("Could not read file.", path, e) from e

    logger.debug("Read %d chars from %s", len(content), path)
    return content


def write_snippets_file(path: str, text: str) -> None:
    """Write a snippets file in one operation.

    Creates the parent directory if needed.

    Raises:
        FileOpenError: If the parent directory cannot be created.
        FileWriteError: If the file cannot be written.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileOpenError("Could not open file for writing.", path, e) from e

    try:
        target.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileWriteError("Could not write to file.", path, e) from e

    logger.info("Wrote %s", path)
