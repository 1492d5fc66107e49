"""Base path reader interface and protocols.

This module defines the PathReader protocol that every backing store must
implement so providers can fetch raw bytes by a resolved path.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PathReader(Protocol):
    """Interface for path readers."""

    def read_path(self, path: str) -> bytes:
        """Read the raw content addressed by a path.

        Args:
            path: The resolved path (file name, secret id, parameter name).

        Returns:
            The raw bytes stored under the path.

        Raises:
            ReadFailure: When the path is missing, inaccessible or the
                backing call fails.
        """
        ...
