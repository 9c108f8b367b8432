# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Define Tag class to hold a DICOM (group, element) tag and related functions.

The 4 bytes of the DICOM tag are stored as an 'int'. Tags are
stored as a single number and separated to (group, element) as required.

On the wire a tag is four bytes: the group and then the element, each a
little endian 16-bit number. The canonical *tag key* used to look tags up in
the dictionaries is the 8 hex digit string ``GGGGEEEE``, upper case.
"""
from typing import Tuple, Union, TypeVar, Optional


T = TypeVar("T", int, str)


def Tag(arg: Union[T, Tuple[T, T]], arg2: Optional[T] = None) -> "BaseTag":
    """Create a :class:`BaseTag`.

    General function for creating a :class:`BaseTag` in any of the standard
    forms:

    * ``Tag(0x00100015)``
    * ``Tag('00100015')``
    * ``Tag('0x00100015')``
    * ``Tag((0x10, 0x50))``
    * ``Tag(('0x10', '0x50'))``
    * ``Tag(0x0010, 0x0015)``
    * ``Tag("PatientName")``

    Parameters
    ----------
    arg : int or str or 2-tuple
        If :class:`int` or :class:`str`, then either the group or the combined
        group/element number of the DICOM tag. If :class:`tuple` then the
        (group, element) numbers as :class:`!int` or :class:`!str`.
    arg2 : int or str, optional
        The element number of the DICOM tag, required when `arg` only contains
        the group number of the tag.

    Returns
    -------
    BaseTag
    """
    if isinstance(arg, BaseTag):
        return arg

    if arg2 is not None:
        # act as if was passed a single tuple
        arg = (arg, arg2)  # type: ignore

    if isinstance(arg, (tuple, list)):
        if len(arg) != 2:
            raise ValueError("Tag must be created using an int or 2-tuple")

        valid = False
        if isinstance(arg[0], str):
            valid = isinstance(arg[1], str)
            if valid:
                arg = (int(arg[0], 16), int(arg[1], 16))  # type: ignore
        elif isinstance(arg[0], int):
            valid = isinstance(arg[1], int)
        if not valid:
            raise ValueError(
                "Both arguments for Tag must be the same type, either "
                "string or int."
            )

        if arg[0] > 0xFFFF or arg[1] > 0xFFFF:  # type: ignore
            raise OverflowError(
                "Groups and elements of tags must each be <=2 byte integers"
            )

        long_value = (arg[0] << 16) | arg[1]  # type: ignore

    # Single str parameter
    elif isinstance(arg, str):
        try:
            long_value = int(arg, 16)
            if long_value > 0xFFFFFFFF:
                raise OverflowError(
                    f"Tags are limited to 32-bit length; tag {long_value!r}"
                )
        except ValueError:
            # Try a DICOM keyword
            from dcmdump.datadict import tag_for_keyword
            long_value = tag_for_keyword(arg)
            if long_value is None:
                raise ValueError(
                    f"'{arg}' is not a valid int or DICOM keyword"
                )
    # Single int parameter
    else:
        long_value = arg
        if long_value > 0xFFFFFFFF:
            raise OverflowError(
                f"Tags are limited to 32-bit length; tag {long_value!r}"
            )

    if long_value < 0:
        raise ValueError("Tags must be positive.")

    return BaseTag(long_value)


class BaseTag(int):
    """Represents a DICOM element (group, element) tag.

    Tags are represented as an :class:`int`.

    Attributes
    ----------
    element : int
        The element number of the tag.
    group : int
        The group number of the tag.
    key : str
        The 8 hex digit tag key, e.g. ``'00080018'``.
    is_private : bool
        Returns ``True`` if the corresponding element is private, ``False``
        otherwise.
    """
    def __str__(self) -> str:
        """Return the tag value as a hex string '(gggg, eeee)'."""
        return "({0:04x}, {1:04x})".format(self.group, self.element)

    __repr__ = __str__

    @property
    def group(self) -> int:
        """Return the tag's group number as :class:`int`."""
        return self >> 16

    @property
    def element(self) -> int:
        """Return the tag's element number as :class:`int`."""
        return self & 0xffff

    elem = element  # alternate syntax

    @property
    def key(self) -> str:
        """Return the tag key as an 8 character upper case hex string."""
        return "{0:08X}".format(int(self))

    @property
    def is_private(self) -> bool:
        """Return ``True`` if the tag is private (has an odd group number)."""
        return self.group % 2 == 1


def TupleTag(group_elem: Tuple[int, int]) -> BaseTag:
    """Fast factory for :class:`BaseTag` object with known safe (group, elem)
    :class:`tuple`
    """
    long_value = group_elem[0] << 16 | group_elem[1]
    return BaseTag(long_value)


def tag_key(raw: bytes) -> str:
    """Return the tag key for the 4 raw tag bytes `raw`.

    The raw bytes ``b0 b1 b2 b3`` are the group low and high bytes followed
    by the element low and high bytes, so the key is ``b1 b0 b3 b2`` in
    upper case hex.

    Parameters
    ----------
    raw : bytes-like
        Exactly 4 bytes, as read from the buffer.

    Returns
    -------
    str
        The tag key, e.g. ``'7FE00010'`` for ``b'\\xe0\\x7f\\x10\\x00'``.
    """
    if len(raw) != 4:
        raise ValueError(
            f"A tag is 4 bytes long, got {len(raw)} byte(s)"
        )

    return "{:02X}{:02X}{:02X}{:02X}".format(raw[1], raw[0], raw[3], raw[2])


def key_to_tag(key: str) -> BaseTag:
    """Return the :class:`BaseTag` for an 8 hex digit tag key."""
    if len(key) != 8:
        raise ValueError(f"'{key}' is not an 8 character tag key")

    return TupleTag((int(key[:4], 16), int(key[4:], 16)))


# Define some special tags:
# See DICOM Standard Part 5, Section 7.5

# start of Sequence Item
ItemTag = TupleTag((0xFFFE, 0xE000))

# end of Sequence Item
ItemDelimiterTag = TupleTag((0xFFFE, 0xE00D))

# end of Sequence of undefined length
SequenceDelimiterTag = TupleTag((0xFFFE, 0xE0DD))

# bulk pixel payload, never buffered into a decoded element
PixelDataTag = TupleTag((0x7FE0, 0x0010))

TransferSyntaxUIDTag = TupleTag((0x0002, 0x0010))
