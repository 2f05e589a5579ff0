"""Reading and building packed data files with per-file byte encryption."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from .cipher import Cipher


class FileNotInPackError(FileNotFoundError):
    """The requested path is not stored in the data pack."""


def windows_path(path: str) -> str:
    """Return ``path`` with every forward slash replaced by a backslash."""
    return path.replace("/", "\\")


def _split(path: str) -> tuple[bytes, bytes]:
    directory, sep, name = path.rpartition("/")
    return (directory + sep).encode("utf-8"), name.encode("utf-8")


class _Cursor:
    """Bounds-checked sequential reads over the pack bytes."""

    def __init__(self, data: bytes, position: int = 0):
        self.data = data
        self.position = position

    def take(self, count: int) -> bytes:
        end = self.position + count
        if self.position < 0 or end > len(self.data):
            raise ValueError("truncated data pack")
        chunk = self.data[self.position:end]
        self.position = end
        return chunk

    def byte(self) -> int:
        return self.take(1)[0]

    def u16(self) -> int:
        return int.from_bytes(self.take(2), "little")

    def u32(self) -> int:
        return int.from_bytes(self.take(4), "little")

    def dir_name(self) -> bytes:
        length = self.byte()
        key = ~length & 0xFF
        return bytes(c ^ key for c in self.take(length))

    def file_name(self) -> bytes:
        length = self.byte()
        return bytes(~c & 0xFF for c in self.take(length))


class VirtualFile:
    """A decrypting reader over one file stored in a data pack."""

    def __init__(self, data: bytes, offset: int, size: int, name: str = ""):
        self.name = name
        self.size = size
        self._data = data
        self._offset = offset
        self._position = 0
        self._cipher = Cipher(size)

    def read(self, size: int = -1) -> bytes:
        """Read and decrypt up to ``size`` bytes; a negative size reads the rest."""
        remaining = max(self.size - self._position, 0)
        count = remaining if size < 0 else min(size, remaining)
        start = self._offset + self._position
        raw = self._data[start:start + count]
        self._position += len(raw)
        return bytes(self._cipher.decrypt_byte(value) for value in raw)

    def seek(self, position: int) -> None:
        """Move to ``position`` within the file and resynchronise the keystream."""
        if position < 0:
            raise ValueError("negative seek position")
        self._position = position
        self._cipher = Cipher(self.size)
        self._cipher.skip(position)

    def tell(self) -> int:
        """The current position within the file."""
        return self._position

    def at_end(self) -> bool:
        """True once the position has reached the file's size."""
        return self._position >= self.size


class DataPack:
    """A read-only view of a packed data file."""

    def __init__(self, data: bytes):
        self._data = bytes(data)

    @classmethod
    def from_file(cls, path) -> DataPack:
        """Load a data pack from disk."""
        return cls(Path(path).read_bytes())

    def _locate(self, path: str) -> tuple[int, int]:
        directory, filename = _split(path)
        cursor = _Cursor(self._data)
        header_size = cursor.u32()
        dir_count = cursor.u16()

        file_offset = -1
        next_offset = 0
        for index in range(dir_count):
            name = cursor.dir_name()
            offset = cursor.u32()
            if name == directory:
                file_offset = offset
                if index == dir_count - 1:
                    next_offset = len(self._data) - header_size
                else:
                    cursor.dir_name()
                    next_offset = cursor.u32()
                break
        if file_offset == -1:
            raise FileNotInPackError(f"no directory for '{path}' in data pack")

        limit = next_offset + header_size
        cursor.position = file_offset + header_size
        while True:
            name = cursor.file_name()
            size = cursor.u32()
            if name == filename:
                if cursor.position >= limit:
                    break
                return cursor.position, size
            cursor.position += size
            if cursor.position >= limit:
                break
        raise FileNotInPackError(f"'{path}' is not in data pack")

    def open(self, path: str) -> VirtualFile:
        """Open a stored file for reading; raise FileNotInPackError if absent."""
        offset, size = self._locate(path)
        return VirtualFile(self._data, offset, size, path)

    def read_bytes(self, path: str) -> bytes:
        """Return the decrypted contents of a stored file."""
        return self.open(path).read()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        try:
            self._locate(path)
        except (FileNotInPackError, ValueError):
            return False
        return True


def build_data_pack(files: Mapping[str, bytes]) -> bytes:
    """Build pack bytes holding ``files`` (path -> contents), grouped by directory."""
    groups: dict[bytes, list[tuple[bytes, bytes]]] = {}
    for path, content in files.items():
        directory, name = _split(path)
        if len(directory) > 0xFF or len(name) > 0xFF:
            raise ValueError(f"path component too long: '{path}'")
        groups.setdefault(directory, []).append((name, bytes(content)))
    if len(groups) > 0xFFFF:
        raise ValueError("too many directories")

    header_size = 6 + sum(5 + len(directory) for directory in groups)
    body = bytearray()
    offsets = []
    for entries in groups.values():
        offsets.append(len(body))
        for name, content in entries:
            body.append(len(name))
            body += bytes(~c & 0xFF for c in name)
            body += len(content).to_bytes(4, "little")
            cipher = Cipher(len(content))
            body += bytes(cipher.encrypt_byte(value) for value in content)

    header = bytearray()
    header += header_size.to_bytes(4, "little")
    header += len(groups).to_bytes(2, "little")
    for directory, offset in zip(groups, offsets):
        key = ~len(directory) & 0xFF
        header.append(len(directory))
        header += bytes(c ^ key for c in directory)
        header += offset.to_bytes(4, "little")
    return bytes(header + body)