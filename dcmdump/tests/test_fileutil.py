# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Test suite for fileutil.py"""

from io import BytesIO
from pathlib import Path

import pytest

from dcmdump.errors import (
    DecodeError, DelimiterNotFoundError, OutOfBoundsError
)
from dcmdump.fileutil import (
    delimiter_bytes, find_delimiter, path_from_pathlike, read_file_bytes,
    read_fixed, read_tag, read_UL, read_US
)
from dcmdump.tag import ItemDelimiterTag, SequenceDelimiterTag
from dcmdump.util.hexutil import hex2bytes


class TestReadFixed:
    def test_view(self):
        buffer = b"\x00\x01\x02\x03\x04\x05"
        view = read_fixed(buffer, 2, 3)
        assert isinstance(view, memoryview)
        assert view.readonly
        assert b"\x02\x03\x04" == view

    def test_to_the_end(self):
        assert b"\x05" == read_fixed(b"\x00\x01\x02\x03\x04\x05", 5, 1)
        assert b"" == read_fixed(b"\x00\x01", 2, 0)

    def test_past_end(self):
        msg = (
            r"Unable to read 4 byte\(s\) at offset 0x4, the readable data "
            r"ends at offset 0x6"
        )
        with pytest.raises(OutOfBoundsError, match=msg) as exc:
            read_fixed(b"\x00" * 6, 4, 4)

        assert 4 == exc.value.offset
        assert isinstance(exc.value, DecodeError)
        assert isinstance(exc.value, EOFError)

    def test_past_limit(self):
        """The limit is enforced even inside the buffer"""
        with pytest.raises(OutOfBoundsError):
            read_fixed(b"\x00" * 16, 4, 4, limit=6)

        assert b"\x00\x00" == read_fixed(b"\x00" * 16, 4, 2, limit=6)

    def test_limit_past_buffer(self):
        with pytest.raises(OutOfBoundsError):
            read_fixed(b"\x00" * 6, 4, 4, limit=100)

    def test_negative_offset(self):
        with pytest.raises(OutOfBoundsError):
            read_fixed(b"\x00" * 6, -1, 2)


class TestReadNumbers:
    def test_read_US(self):
        assert 512 == read_US(b"\xff\x00\x02", 1)
        with pytest.raises(OutOfBoundsError):
            read_US(b"\x00\x02", 1)

    def test_read_UL(self):
        assert 0xFFFFFFFF == read_UL(b"\xff\xff\xff\xff", 0)
        assert 28 == read_UL(b"\x1c\x00\x00\x00", 0)
        with pytest.raises(OutOfBoundsError):
            read_UL(b"\x1c\x00\x00\x00", 0, limit=3)

    def test_read_tag(self):
        assert "7FE00010" == read_tag(b"\xe0\x7f\x10\x00", 0)
        assert "FFFEE0DD" == read_tag(b"\x00\xfe\xff\xdd\xe0", 1)
        with pytest.raises(OutOfBoundsError):
            read_tag(b"\xe0\x7f\x10", 0)


class TestFindDelimiter:
    def test_delimiter_bytes(self):
        assert b"\xfe\xff\xdd\xe0" == delimiter_bytes(SequenceDelimiterTag)
        assert b"\xfe\xff\x0d\xe0" == delimiter_bytes(0xFFFEE00D)
        assert b"\xfe\xff\x0d\xe0" == delimiter_bytes("FFFEE00D")

    def test_found(self):
        buffer = hex2bytes("41 42 43 fe ff dd e0 00 00 00 00")
        assert 3 == find_delimiter(buffer, 0, None, [SequenceDelimiterTag])

    def test_at_start(self):
        buffer = hex2bytes("fe ff dd e0 00 00 00 00")
        assert 0 == find_delimiter(buffer, 0, None, [SequenceDelimiterTag])

    def test_first_of_several(self):
        buffer = hex2bytes("41 fe ff dd e0 42 fe ff 0d e0")
        delimiters = [ItemDelimiterTag, SequenceDelimiterTag]
        assert 1 == find_delimiter(buffer, 0, None, delimiters)
        assert 6 == find_delimiter(buffer, 2, None, delimiters)

    def test_must_fit_before_limit(self):
        """A delimiter that ends after the limit is not found"""
        buffer = hex2bytes("41 42 fe ff dd e0")
        with pytest.raises(DelimiterNotFoundError) as exc:
            find_delimiter(buffer, 0, 5, [SequenceDelimiterTag])

        assert 0 == exc.value.offset
        assert 2 == find_delimiter(buffer, 0, 6, [SequenceDelimiterTag])

    def test_not_found(self):
        msg = (
            r"End of data reached at offset 0x8 before delimiter "
            r"\(fffe, e00d\), \(fffe, e0dd\) found \(search started at "
            r"offset 0x2\)"
        )
        with pytest.raises(DelimiterNotFoundError, match=msg):
            find_delimiter(
                b"\x00" * 8, 2, None, [ItemDelimiterTag, SequenceDelimiterTag]
            )

    def test_empty(self):
        with pytest.raises(DelimiterNotFoundError):
            find_delimiter(b"", 0, None, [SequenceDelimiterTag])

    @pytest.mark.parametrize("padding", range(0, 12))
    def test_across_chunks(self, padding):
        """The result doesn't depend on the search chunk size"""
        buffer = b"\x00" * padding + delimiter_bytes(SequenceDelimiterTag)
        for read_size in (4, 5, 6, 7, 8, 1024):
            assert padding == find_delimiter(
                buffer, 0, None, [SequenceDelimiterTag], read_size=read_size
            )

    def test_generator_of_delimiters(self):
        """The delimiters can be any iterable"""
        buffer = hex2bytes("41 fe ff 0d e0")
        delimiters = (d for d in [ItemDelimiterTag])
        assert 1 == find_delimiter(buffer, 0, None, delimiters)


class TestFiles:
    def test_path_from_pathlike(self):
        assert "test.dcm" == path_from_pathlike(Path("test.dcm"))
        assert "test.dcm" == path_from_pathlike("test.dcm")
        fp = BytesIO()
        assert fp is path_from_pathlike(fp)

    def test_read_file_bytes(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"\x00\x01\x02")
        assert b"\x00\x01\x02" == read_file_bytes(path)
        assert b"\x00\x01\x02" == read_file_bytes(str(path))

    def test_read_file_like(self):
        fp = BytesIO(b"\x00\x01\x02")
        fp.seek(1)
        assert b"\x01\x02" == read_file_bytes(fp)
        assert not fp.closed
