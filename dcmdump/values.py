# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Functions for rendering raw data element values as display strings."""

from struct import unpack
from typing import Optional, Union

from dcmdump.datadict import (
    VRDictionary, TransferSyntaxDictionary, vr_dictionary,
    transfer_syntax_dictionary
)
from dcmdump.tag import BaseTag, TransferSyntaxUIDTag

default_encoding = "iso8859"

# struct format characters for the widths rendered as unsigned numbers
_number_formats = {1: 'B', 2: 'H', 4: 'L'}


def convert_numbers(byte_string: bytes, width: int) -> str:
    """Return `byte_string` as space separated unsigned decimal numbers.

    Parameters
    ----------
    byte_string : bytes
        Tightly packed little endian numbers.
    width : int
        The size of each number in bytes, one of 1, 2 or 4.

    Returns
    -------
    str
        The decimal numbers separated by single spaces. Bytes left over
        after the last complete number are ignored.
    """
    count = len(byte_string) // width
    format_string = "<%u%c" % (count, _number_formats[width])
    value = unpack(format_string, byte_string[:count * width])

    return " ".join(str(number) for number in value)


def convert_text(byte_string: bytes, is_padded: bool = False) -> str:
    """Return `byte_string` decoded as text.

    If `is_padded` then a single trailing NUL padding byte is removed.
    """
    if is_padded and byte_string[-1:] == b'\x00':
        byte_string = byte_string[:-1]

    return byte_string.decode(default_encoding)


def format_value(
    VR: Optional[str],
    raw: Union[bytes, memoryview],
    tag: Optional[Union[int, BaseTag]] = None,
    *,
    vr_dict: VRDictionary = vr_dictionary,
    uid_dict: TransferSyntaxDictionary = transfer_syntax_dictionary,
) -> str:
    """Return the display string for the raw value of an element.

    Parameters
    ----------
    VR : str or None
        The VR of the element, ``None`` if it isn't known (implicit VR).
    raw : bytes or memoryview
        The raw value bytes.
    tag : int, optional
        The element's tag. For (0002,0010) *Transfer Syntax UID* the name of
        the transfer syntax is appended if `uid_dict` knows it.
    vr_dict : VRDictionary, optional
        The VR dictionary used to classify `VR`.
    uid_dict : TransferSyntaxDictionary, optional
        The dictionary used to name transfer syntaxes.

    Returns
    -------
    str
        * Fixed size VRs with a width of 1, 2 or 4 bytes: the values as
          space separated unsigned decimals.
        * Padded VRs: the text without a single trailing NUL byte.
        * Anything else: the text as is.
    """
    byte_string = bytes(raw)
    entry = vr_dict.lookup(VR)

    if entry and entry.is_fixed_size and entry.width in _number_formats:
        value = convert_numbers(byte_string, entry.width)
    else:
        value = convert_text(byte_string, bool(entry and entry.is_padded))

    if tag is not None and tag == TransferSyntaxUIDTag:
        uid = convert_text(byte_string, is_padded=True)
        uid_entry = uid_dict.lookup(uid)
        if uid_entry is not None:
            value = f"{uid} {uid_entry.name}"

    return value
