"""File system cache adapter."""

import asyncio
import logging
import pathlib

from getfavicon.exceptions import CacheAdapterError, CacheMissError

logger = logging.getLogger(__name__)

FILE_SUFFIX = ".txt"


class FileSystemAdapter:
    """A cache adapter that stores each key-value pair in its own file,
    `<directory>/<key>.txt`.

    Entries never expire; a `set` on an existing key overwrites the file. Writers to
    distinct keys never conflict, concurrent writers to the same key race and the
    last write wins.
    """

    directory: pathlib.Path

    def __init__(self, directory: str | pathlib.Path) -> None:
        self.directory = pathlib.Path(directory)

    def _path(self, key: str) -> pathlib.Path:
        if not key or "/" in key or "\\" in key or "\x00" in key:
            raise CacheAdapterError(f"Invalid cache key: {key!r}")
        return self.directory / f"{key}{FILE_SUFFIX}"

    async def get(self, key: str) -> bytes | None:
        """Get the content of the file for the key. Returns `None` if there is no such file.

        Raises:
            - `CacheAdapterError` if the file exists but can't be read.
        """
        path = self._path(key)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            logger.debug(f"Cache file not found: {path}")
            return None
        except OSError as exc:
            raise CacheAdapterError(f"Failed to read {path}: {exc}") from exc

    async def set(self, key: str, value: bytes) -> None:
        """Write the value to the file for the key, creating the cache directory first
        if it doesn't exist.

        Raises:
            - `CacheAdapterError` if the directory can't be created or the file can't be
              written.
        """
        path = self._path(key)
        try:
            await asyncio.to_thread(self.directory.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheAdapterError(
                f"Failed to create cache directory {self.directory}: {exc}"
            ) from exc

        try:
            await asyncio.to_thread(path.write_bytes, value)
        except OSError as exc:
            raise CacheAdapterError(f"Failed to write {path}: {exc}") from exc

    async def keys(self) -> list[str]:
        """Return the sorted file names found in the cache directory.

        Raises:
            - `CacheMissError` if the cache directory doesn't exist.
            - `CacheAdapterError` if the directory can't be listed.
        """
        try:
            entries = await asyncio.to_thread(lambda: [p.name for p in self.directory.iterdir()])
        except FileNotFoundError as exc:
            raise CacheMissError(f"Cache directory not found: {self.directory}") from exc
        except OSError as exc:
            raise CacheAdapterError(f"Failed to list {self.directory}: {exc}") from exc
        return sorted(entries)

    async def close(self) -> None:
        """Nothing to release, files are closed after each operation."""
        pass
