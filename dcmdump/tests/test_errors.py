# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Tests for errors.py"""

import pytest

from dcmdump.errors import (
    DecodeError, DelimiterNotFoundError, InvalidDicomError, OutOfBoundsError,
    UnresolvedVRError
)


def test_message():
    """Test InvalidDicomError with a message"""
    with pytest.raises(InvalidDicomError, match='test msg'):
        raise InvalidDicomError('test msg')


def test_no_message():
    """Test InvalidDicomError with no message"""
    msg = r'The specified file is not a valid DICOM file\.'
    with pytest.raises(InvalidDicomError, match=msg):
        raise InvalidDicomError


@pytest.mark.parametrize(
    "cls, base",
    [
        (OutOfBoundsError, EOFError),
        (DelimiterNotFoundError, EOFError),
        (UnresolvedVRError, ValueError),
    ]
)
def test_decode_errors(cls, base):
    """Decode errors keep the offset and can be caught by kind"""
    with pytest.raises(DecodeError, match="bad element") as exc:
        raise cls("bad element", 0x84)

    assert isinstance(exc.value, base)
    assert 0x84 == exc.value.offset
    assert "bad element" == str(exc.value)


def test_decode_error_no_offset():
    assert DecodeError("problem").offset is None
