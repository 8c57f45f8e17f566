"""
Binary search over the lines of a sorted text file.

The search works on byte offsets rather than line numbers, so lines may have
any length and the file is never loaded into memory: every probe seeks to an
offset and reads bounded chunks backward and forward until it has recovered
the whole line around that offset.

Usage:
    def compare(line: bytes, value: int) -> int:
        key = int(line.split(b"\\t", 1)[0])
        return key - value

    with FileBinaryLineSearch("cities.txt", compare) as searcher:
        line = searcher.search(2049)
"""

import logging
from pathlib import Path
from typing import Any, Callable, NamedTuple, Optional, Set, Tuple, Union

from geoadapters.geocoding.base import InvalidArgument

logger = logging.getLogger(__name__)

#: compare(line, value) < 0 if line < value, > 0 if line > value, 0 on match
CompareFunction = Callable[[bytes, Any], int]


class Line(NamedTuple):
    value: bytes
    start: int  # offset of the first byte of the line
    end: int  # offset just past the last byte, before the line ending


class FileBinaryLineSearch:
    """
    Search a file sorted ascending on some key for the line matching a value.

    The comparator decides what "matching" means, e.g. a range row matches
    any value between its two bounds.

    The file handle stays open for the life of the object; use it as a
    context manager, or call close().
    """

    def __init__(
        self,
        path: Union[str, Path],
        compare: CompareFunction,
        line_ending: bytes = b"\n",
        buffer_size: int = 1024,
    ):
        if not callable(compare):
            raise InvalidArgument(f'Given function "{compare!r}" is not callable.')

        if not line_ending:
            raise InvalidArgument("Line ending must not be empty.")

        if buffer_size < len(line_ending) + 1:
            raise InvalidArgument(
                f"Given buffer size {buffer_size} should be greater than {len(line_ending)}."
            )

        try:
            self._handle = open(path, "rb")
        except OSError as e:
            raise InvalidArgument(f'Given file "{path}" could not be opened.') from e

        self.path = Path(path)
        self.compare = compare
        self.line_ending = line_ending
        self.buffer_size = buffer_size

        self._handle.seek(0, 2)
        self.file_size = self._handle.tell()
        self._data_end = self._find_data_end()

    def __enter__(self) -> "FileBinaryLineSearch":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def search(self, value: Any) -> Optional[bytes]:
        """
        Find the line the comparator reports as equal to `value`.

        Returns:
            The matching line without its line ending, or None if not found
        """
        if self._data_end == 0:
            return None

        lo, hi = 0, self._data_end
        visited: Set[Tuple[int, int]] = set()

        # A repeated (lo, hi) pair means the probe keeps resolving to a line
        # already ruled out, so there is nothing left between the bounds.
        while (lo, hi) not in visited:
            visited.add((lo, hi))

            line = self._line_at((lo + hi + 1) // 2)
            cmp = self.compare(line.value, value)

            if cmp < 0:
                lo = line.end
            elif cmp > 0:
                hi = line.start
            else:
                return line.value

        logger.debug(f"{self.path.name}: No line matches {value!r}")
        return None

    def _find_data_end(self) -> int:
        """File size minus a trailing line ending, if any."""
        size = len(self.line_ending)
        if self.file_size < size:
            return self.file_size
        self._handle.seek(self.file_size - size)
        if self._handle.read(size) == self.line_ending:
            return self.file_size - size
        return self.file_size

    def _line_at(self, offset: int) -> Line:
        offset = self._snap_out_of_line_ending(offset)
        left = self._read_backward(offset)
        right = self._read_forward(offset)
        return Line(left + right, offset - len(left), offset + len(right))

    def _snap_out_of_line_ending(self, offset: int) -> int:
        """Move an offset that falls inside a multi-byte line ending to its start."""
        size = len(self.line_ending)
        if size == 1:
            return offset

        start = max(0, offset - size + 1)
        self._handle.seek(start)
        window = self._handle.read(offset - start + size - 1)

        position = window.find(self.line_ending)
        while position != -1:
            ending_start = start + position
            if ending_start < offset < ending_start + size:
                return ending_start
            position = window.find(self.line_ending, position + 1)
        return offset

    def _read_backward(self, offset: int) -> bytes:
        """Bytes from the previous line ending (or file start) up to `offset`."""
        result = b""
        while offset > 0:
            read_size = min(self.buffer_size, offset)
            offset -= read_size
            self._handle.seek(offset)
            buffer = self._handle.read(read_size)

            if not buffer:
                break
            result = buffer + result

            if self.line_ending in result:
                break

        return result.rsplit(self.line_ending, 1)[-1]

    def _read_forward(self, offset: int) -> bytes:
        """Bytes from `offset` up to the next line ending (or file end)."""
        self._handle.seek(offset)
        result = b""
        while True:
            buffer = self._handle.read(self.buffer_size)

            if not buffer:
                break
            result += buffer

            if self.line_ending in result:
                break

        return result.split(self.line_ending, 1)[0]
