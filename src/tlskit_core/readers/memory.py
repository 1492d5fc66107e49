"""In-memory path reader implementation.

This module provides the InMemoryPathReader class, a dictionary backed reader
for development and testing.
"""

from collections.abc import Mapping

import structlog

from tlskit_core.exceptions import ReadFailure

# Get logger for this module
logger = structlog.get_logger(__name__)


class InMemoryPathReader:
    """Path reader that serves content from an in-memory mapping."""

    def __init__(self, values: Mapping[str, bytes | str] | None = None) -> None:
        """Initialize the in-memory reader.

        Args:
            values: Optional initial mapping of path to content. String
                values are stored UTF-8 encoded.
        """
        self._values: dict[str, bytes] = {}
        for path, value in (values or {}).items():
            self.put(path, value)

    def put(self, path: str, value: bytes | str) -> None:
        """Store content under a path."""
        if isinstance(value, str):
            value = value.encode("utf-8")
        self._values[path] = value

    def read_path(self, path: str) -> bytes:
        """Read content stored under a path.

        Raises:
            ReadFailure: When nothing is stored under the path.
        """
        try:
            content = self._values[path]
        except KeyError as e:
            raise ReadFailure(
                f"PathReader: no value stored for path {path}",
                path=path,
                reader="memory",
            ) from e

        logger.debug("MEMORY_PATH_READ", path=path, size=len(content))
        return content

    def clear(self) -> None:
        """Remove all stored values."""
        self._values.clear()

    def paths(self) -> list[str]:
        """Get the stored paths, sorted."""
        return sorted(self._values)
