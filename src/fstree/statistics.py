"""Counters collected while the tree is being built."""

from typing import Dict, Optional


class Statistics:
    """Directory, file and byte totals observed during a single build.

    Only the tree builder mutates an instance, and only while a build is running.
    Symbolic links are counted as files.

    Example:
        >>> stats = Statistics()
        >>> stats.add_dirs(2)
        >>> stats.add_files(3)
        >>> stats.add_byte_size(60)
        >>> str(stats)
        '2 directories, 3 files'
        >>> stats.to_dict()
        {'directories': 2, 'files': 3, 'bytes': 60}
    """

    def __init__(self) -> None:
        self._dirs = 0
        self._files = 0
        self._bytes = 0

    @property
    def directories(self) -> int:
        return self._dirs

    @property
    def files(self) -> int:
        return self._files

    @property
    def bytes(self) -> int:
        return self._bytes

    def add_dirs(self, n: int) -> None:
        self._dirs += n

    def add_files(self, n: int) -> None:
        self._files += n

    def add_byte_size(self, n: int) -> None:
        self._bytes += n

    def summary(self, total_size: Optional[str] = None) -> str:
        """Return the one-line summary printed under the tree.

        Args:
            total_size: Pre-formatted total size to append, if sizes are shown.
        """
        line = str(self)
        if total_size is not None:
            line += f", {total_size} total"
        return line

    def to_dict(self) -> Dict[str, int]:
        return {"directories": self._dirs, "files": self._files, "bytes": self._bytes}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Statistics):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self._dirs} directories, {self._files} files"

    def __repr__(self) -> str:
        return f"Statistics(directories={self._dirs}, files={self._files}, bytes={self._bytes})"
