# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Bounds checked reads from an in-memory buffer and delimiter searches."""
import os
import pathlib
from struct import pack, unpack
from typing import Iterable, Optional, Union, BinaryIO

from dcmdump.errors import DelimiterNotFoundError, OutOfBoundsError
from dcmdump.tag import BaseTag, Tag, tag_key

BufferType = Union[bytes, bytearray, memoryview]


def read_fixed(
    buffer: BufferType, offset: int, size: int, limit: Optional[int] = None
) -> memoryview:
    """Return a view of `size` bytes of `buffer` starting at `offset`.

    Parameters
    ----------
    buffer : bytes-like
        The buffer to read from.
    offset : int
        The offset of the first byte to read.
    size : int
        The number of bytes to read.
    limit : int, optional
        An offset that the read must not go past, in addition to the end of
        the buffer.

    Returns
    -------
    memoryview
        A read-only view into `buffer`; no bytes are copied.

    Raises
    ------
    OutOfBoundsError
        If ``offset + size`` is past the end of `buffer` or past `limit`.
    """
    end = len(buffer) if limit is None else min(limit, len(buffer))
    if offset < 0 or offset + size > end:
        raise OutOfBoundsError(
            f"Unable to read {size} byte(s) at offset 0x{offset:x}, the "
            f"readable data ends at offset 0x{end:x}",
            offset
        )

    return memoryview(buffer)[offset:offset + size].toreadonly()


def read_tag(
    buffer: BufferType, offset: int, limit: Optional[int] = None
) -> str:
    """Return the 8 character tag key of the 4 tag bytes at `offset`."""
    return tag_key(read_fixed(buffer, offset, 4, limit))


def read_US(
    buffer: BufferType, offset: int, limit: Optional[int] = None
) -> int:
    """Return the little endian unsigned short at `offset`."""
    return unpack("<H", read_fixed(buffer, offset, 2, limit))[0]


def read_UL(
    buffer: BufferType, offset: int, limit: Optional[int] = None
) -> int:
    """Return the little endian unsigned long at `offset`."""
    return unpack("<L", read_fixed(buffer, offset, 4, limit))[0]


def delimiter_bytes(delimiter: Union[int, str, BaseTag]) -> bytes:
    """Return the 4 bytes a tag is encoded as in a little endian stream."""
    delimiter = Tag(delimiter)
    return pack("<HH", delimiter.group, delimiter.elem)


def find_delimiter(
    buffer: BufferType,
    start: int,
    limit: Optional[int],
    delimiters: Iterable[Union[int, str, BaseTag]],
    read_size: int = 1024 * 8,
) -> int:
    """Return the offset of the first delimiter tag at or after `start`.

    The result is the smallest offset ``o >= start`` with ``o + 4 <= limit``
    whose 4 bytes encode any of `delimiters`, i.e. the same offset a byte by
    byte scan would stop at. The search looks at one `read_size` chunk at a
    time and steps back 3 bytes between chunks in case a delimiter crosses a
    chunk boundary.

    Parameters
    ----------
    buffer : bytes-like
        The buffer to search.
    start : int
        The offset to start the search from.
    limit : int or None
        An offset the delimiter must end at or before, in addition to the
        end of the buffer.
    delimiters : iterable of int
        The delimiter tags to search for.
    read_size : int, optional
        Number of bytes to search at a time.

    Returns
    -------
    int
        The offset of the first byte of the delimiter.

    Raises
    ------
    DelimiterNotFoundError
        If none of the delimiters is found before the end of the data.
    """
    end = len(buffer) if limit is None else min(limit, len(buffer))
    delimiters = list(delimiters)
    patterns = [delimiter_bytes(delimiter) for delimiter in delimiters]
    search_rewind = 3
    view = memoryview(buffer)

    chunk_start = start
    while chunk_start + 4 <= end:
        chunk_end = min(chunk_start + read_size, end)
        chunk = bytes(view[chunk_start:chunk_end])
        found = [idx for idx in map(chunk.find, patterns) if idx != -1]
        if found:
            return chunk_start + min(found)

        if chunk_end == end:
            break

        # rewind a bit in case delimiter crossed read_size boundary
        chunk_start = chunk_end - search_rewind

    names = ", ".join(str(Tag(delimiter)) for delimiter in delimiters)
    raise DelimiterNotFoundError(
        f"End of data reached at offset 0x{end:x} before delimiter {names} "
        f"found (search started at offset 0x{start:x})",
        start
    )


def path_from_pathlike(
    file_object: Union[str, "os.PathLike[str]", BinaryIO]
) -> Union[str, BinaryIO]:
    """Returns the path if `file_object` is a path-like object, otherwise the
    original `file_object`.

    Parameters
    ----------
    file_object: str or PathLike or file-like

    Returns
    -------
    str or file-like
        the string representation of the given path object, or the object
        itself in case of an object not representing a path.
    """
    try:
        return os.fspath(file_object)  # type: ignore[arg-type]
    except TypeError:
        return file_object  # type: ignore[return-value]


def read_file_bytes(
    file_object: Union[str, pathlib.Path, BinaryIO]
) -> bytes:
    """Return the complete contents of a path or binary file-like.

    A file-like is read from its current position and left open.
    """
    file_object = path_from_pathlike(file_object)
    if isinstance(file_object, str):
        with open(file_object, 'rb') as fp:
            return fp.read()

    return file_object.read()
