"""Filesystem drivers used to read off-ledger files such as JSON metadata."""

from __future__ import annotations

import asyncio
import json
import mimetypes
from abc import abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any, Mapping

from .base import Driver

__all__ = [
    "File",
    "FilesystemDriver",
    "LocalFilesystemDriver",
    "MemoryFilesystemDriver",
]

_FILE_SCHEME = "file://"


@dataclass(frozen=True)
class File:
    """Contents of a file read through a filesystem driver."""

    path: str
    buffer: bytes
    content_type: str | None = None

    @property
    def filename(self) -> str:
        return PurePosixPath(self.path).name

    def text(self, encoding: str = "utf-8") -> str:
        return self.buffer.decode(encoding)

    def json(self) -> Any:
        return json.loads(self.buffer)


def _strip_scheme(path: str) -> str:
    return path[len(_FILE_SCHEME):] if path.startswith(_FILE_SCHEME) else path


class FilesystemDriver(Driver):
    """Read-only access to files by path or ``file://`` URI."""

    @abstractmethod
    async def file_exists(self, path: str) -> bool:
        """True if ``path`` is an existing file."""

    @abstractmethod
    async def directory_exists(self, path: str) -> bool:
        """True if ``path`` is an existing directory."""

    async def has(self, path: str) -> bool:
        """True if ``path`` is an existing file or directory."""
        return await self.file_exists(path) or await self.directory_exists(path)

    @abstractmethod
    async def read(self, path: str) -> File:
        """Read a file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """


class LocalFilesystemDriver(FilesystemDriver):
    """Filesystem driver for the local disk, relative to ``base_path``."""

    name = "local"

    def __init__(self, base_path: str | Path | None = None) -> None:
        self.base_path = Path(base_path) if base_path is not None else None

    def _resolve(self, path: str) -> Path:
        resolved = Path(_strip_scheme(path))
        if self.base_path is not None and not resolved.is_absolute():
            resolved = self.base_path / resolved
        return resolved

    async def file_exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._resolve(path).is_file)

    async def directory_exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._resolve(path).is_dir)

    async def read(self, path: str) -> File:
        resolved = self._resolve(path)
        buffer = await asyncio.to_thread(resolved.read_bytes)
        content_type, _ = mimetypes.guess_type(resolved.name)
        return File(path=str(resolved), buffer=buffer, content_type=content_type)


class MemoryFilesystemDriver(FilesystemDriver):
    """Filesystem driver backed by a dict of path -> contents.

    Values may be bytes, str, or any JSON-serializable object.
    """

    name = "memory"

    def __init__(self, files: Mapping[str, Any] | None = None) -> None:
        self._files: dict[str, bytes] = {}
        for path, contents in (files or {}).items():
            self.write(path, contents)

    @staticmethod
    def _normalize(path: str) -> str:
        return str(PurePosixPath("/") / _strip_scheme(path).lstrip("/"))

    def write(self, path: str, contents: Any) -> None:
        if isinstance(contents, str):
            contents = contents.encode()
        elif not isinstance(contents, bytes):
            contents = json.dumps(contents).encode()
        self._files[self._normalize(path)] = contents

    async def file_exists(self, path: str) -> bool:
        await asyncio.sleep(0)
        return self._normalize(path) in self._files

    async def directory_exists(self, path: str) -> bool:
        await asyncio.sleep(0)
        prefix = self._normalize(path).rstrip("/") + "/"
        return any(name.startswith(prefix) for name in self._files)

    async def read(self, path: str) -> File:
        await asyncio.sleep(0)
        normalized = self._normalize(path)
        try:
            buffer = self._files[normalized]
        except KeyError:
            raise FileNotFoundError(f"No such file: '{path}'") from None
        content_type, _ = mimetypes.guess_type(normalized)
        return File(path=normalized, buffer=buffer, content_type=content_type)
