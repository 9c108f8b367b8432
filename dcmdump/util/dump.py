# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Utility functions used to display decoded elements and raw bytes"""

from io import StringIO
from typing import Iterable, Union

from dcmdump import config
from dcmdump.datadict import VRDictionary, vr_dictionary
from dcmdump.dataelem import DataElement
from dcmdump.values import format_value


def print_character(ordchr: int) -> str:
    """Return a printable character, or '.' for non-printable ones."""
    if 31 < ordchr < 126 and ordchr != 92:
        return chr(ordchr)

    return '.'


def hexdump(
    data: Union[bytes, memoryview],
    start_address: int = 0,
    show_address: bool = True,
) -> str:
    """Return a formatted string of hex bytes and characters in `data`.

    Each row shows 16 bytes, optionally preceded by its address, which
    starts at `start_address`.
    """
    str_out = StringIO()
    # space taken up if row has a full 16 bytes
    byteslen = 16 * 3 - 1
    blanks = ' ' * byteslen

    data = bytes(data)
    for row_start in range(0, len(data), 16):
        row = data[row_start:row_start + 16]
        if show_address:
            # address at start of line
            str_out.write("%04x : " % (start_address + row_start))

        # string of two digit hex bytes
        byte_string = ' '.join(["%02x" % x for x in row])
        str_out.write(byte_string)

        # if not 16, pad
        str_out.write(blanks[:byteslen - len(byte_string)])
        str_out.write('  ')

        # character rep of bytes
        str_out.write(''.join([print_character(x) for x in row]))
        str_out.write("\n")

    return str_out.getvalue()


def element_line(
    elem: DataElement,
    indent_chars: str = "    ",
    vr_dict: VRDictionary = vr_dictionary,
) -> str:
    """Return the display line for `elem`.

    The line is ``offset (key) VR width length name value``, indented by
    `indent_chars` once per nesting level. Unknown names are shown as
    ``MISSING`` and values of :attr:`config.max_display_length` bytes or
    more as ``...``. Widths and values are formatted using `vr_dict`.
    """
    entry = vr_dict.lookup(elem.VR)
    width = entry.width if entry else 0
    name = elem.name or "MISSING"
    if elem.length >= config.max_display_length:
        value = "..."
    elif elem.value is None:
        value = ""
    else:
        value = format_value(elem.VR, elem.value, elem.tag, vr_dict=vr_dict)

    return "{}{:04d} ({}) {} {} {} {} {}".format(
        indent_chars * elem.depth, elem.offset, elem.key, elem.VR or "",
        width, elem.length, name, value
    )


def pretty_print(
    elements: Iterable[DataElement], vr_dict: VRDictionary = vr_dictionary
) -> None:
    """Print each element directly, one line each.

    More useful for debugging than building the complete string first, as
    each line shows up as soon as it is formatted.
    """
    for elem in elements:
        print(element_line(elem, vr_dict=vr_dict))
