"""Local file system path reader.

This module provides the LocalPathReader class which resolves paths directly
as files on local storage.
"""

from pathlib import Path

import structlog

from tlskit_core.exceptions import ReadFailure

# Get logger for this module
logger = structlog.get_logger(__name__)


class LocalPathReader:
    """Path reader that reads files from the local file system."""

    def read_path(self, path: str) -> bytes:
        """Read a file by name.

        Args:
            path: File system path to read.

        Returns:
            The file content.

        Raises:
            ReadFailure: When the file cannot be read.
        """
        try:
            content = Path(path).read_bytes()
        except OSError as e:
            logger.warning("LOCAL_FILE_READ_FAILED", path=path, error=str(e))
            raise ReadFailure(
                f"PathReader: cannot read file by name {path}: {e}",
                path=path,
                reader="local",
            ) from e

        logger.debug("LOCAL_FILE_READ", path=path, size=len(content))
        return content
