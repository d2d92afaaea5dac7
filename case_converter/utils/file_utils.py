"""
File utility functions.
"""

from typing import List, Optional
from .logger import get_logger

logger = get_logger(__name__)


def read_file(file_path: str) -> Optional[str]:
    """
    Read content from a file.

    Args:
        file_path: Path to the file

    Returns:
        File content as string, or None if error
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read file {file_path}: {e}")
        return None


def read_lines(file_path: str) -> Optional[List[str]]:
    """
    Read the non-blank lines of a file.

    Args:
        file_path: Path to the file

    Returns:
        Lines without their line endings, or None if the file could not be read
    """
    content = read_file(file_path)
    if content is None:
        return None
    lines = [line for line in content.splitlines() if line.strip()]
    logger.debug(f"Read {len(lines)} lines from {file_path}")
    return lines
