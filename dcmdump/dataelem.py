# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Define the DataElement record produced by the data element decoder."""

from typing import NamedTuple, Optional

from dcmdump.tag import BaseTag, ItemTag, PixelDataTag


class DataElement(NamedTuple):
    """Container for one decoded (but not value converted) element.

    Attributes
    ----------
    tag : BaseTag
        The element's (group, element) tag.
    VR : str or None
        The VR read from the buffer for explicit VR data, ``'00'`` for a
        blank explicit VR, ``None`` for implicit VR data.
    length : int
        The value length in bytes. For undefined length elements this is
        the distance from the start of the value to the delimiter.
    value : memoryview or None
        A read-only view into the decoded buffer, or ``None`` for sequences,
        sequence items and *Pixel Data*.
    offset : int
        The buffer offset of the first byte of the element's tag.
    name : str
        The dictionary name of the element, or ``''`` if not known.
    is_undefined_length : bool
        ``True`` if the element was encoded with a length of ``0xFFFFFFFF``.
    depth : int
        The nesting level; ``0`` for elements of the top level data set.
    """
    tag: BaseTag
    VR: Optional[str]
    length: int
    value: Optional[memoryview]
    offset: int
    name: str = ''
    is_undefined_length: bool = False
    depth: int = 0

    @property
    def key(self) -> str:
        """Return the 8 character tag key, e.g. ``'00080018'``."""
        return self.tag.key

    @property
    def group(self) -> int:
        return self.tag.group

    @property
    def element(self) -> int:
        return self.tag.element

    @property
    def is_item(self) -> bool:
        """Return ``True`` for a sequence item (FFFE,E000)."""
        return self.tag == ItemTag

    @property
    def is_sequence(self) -> bool:
        return self.VR == 'SQ'

    @property
    def is_container(self) -> bool:
        """Return ``True`` if the element holds other elements."""
        return self.is_item or self.is_sequence

    @property
    def is_pixel_data(self) -> bool:
        return self.tag == PixelDataTag

    @property
    def part_of_sequence(self) -> bool:
        """Return ``True`` if the element was found inside a sequence."""
        return self.depth > 0

    @property
    def keyword(self) -> str:
        """Return the element's keyword in the built-in dictionary, or ``''``.

        A :class:`~dcmdump.dataset.DicomFile` decoded with a custom
        dictionary matches keywords against that dictionary instead.
        """
        from dcmdump.datadict import keyword_for_tag
        return keyword_for_tag(self.tag)

    @property
    def repval(self) -> str:
        """Return the value as a display string.

        Numbers are read using the built-in VR dictionary. Use
        :func:`~dcmdump.values.format_value` with `vr_dict` for another.
        """
        from dcmdump.values import format_value
        if self.value is None:
            return ''

        return format_value(self.VR, self.value, self.tag)

    def __str__(self) -> str:
        """Return the element as a single display line.

        Uses the built-in VR dictionary, see
        :func:`~dcmdump.util.dump.element_line`.
        """
        from dcmdump.util.dump import element_line
        return element_line(self)
