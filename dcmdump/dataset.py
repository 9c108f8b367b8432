# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Define the DicomFile class, the result of decoding a DICOM file.

A DicomFile keeps the decoded elements in the order they were found in the
file. Elements of sequences and sequence items follow their container, so
the same tag can appear more than once; lookups return the first match.
"""
from typing import (
    Iterable, Iterator, Optional, Sequence, Tuple, Union, overload
)

from dcmdump.datadict import (
    TagDictionary, VRDictionary, tag_dictionary, vr_dictionary
)
from dcmdump.dataelem import DataElement
from dcmdump.errors import DecodeError
from dcmdump.tag import Tag, TransferSyntaxUIDTag
from dcmdump.uid import UID
from dcmdump.util.dump import element_line
from dcmdump.values import convert_text


class DicomFile:
    """The ordered data elements decoded from one DICOM file.

    Parameters
    ----------
    elements : iterable of DataElement
        The decoded elements, in stream order.
    path : str, optional
        The file the elements were decoded from.
    preamble : bytes, optional
        The 128-byte preamble, ``None`` if the file didn't have one.
    position : int, optional
        The offset of the first byte that wasn't decoded.
    end : int, optional
        The offset decoding was allowed to run up to.
    errors : iterable of DecodeError, optional
        The problems that ended decoding early.
    is_implicit_VR : bool, optional
        The mode the data set was decoded in.
    dictionary : TagDictionary, optional
        The tag dictionary the elements were named from, used to match
        keywords in :meth:`lookup`.
    vr_dict : VRDictionary, optional
        The VR dictionary used for the width column and values when the
        file is displayed.
    """

    def __init__(
        self,
        elements: Iterable[DataElement],
        path: Optional[str] = None,
        *,
        preamble: Optional[bytes] = None,
        position: Optional[int] = None,
        end: Optional[int] = None,
        errors: Iterable[DecodeError] = (),
        is_implicit_VR: Optional[bool] = None,
        dictionary: TagDictionary = tag_dictionary,
        vr_dict: VRDictionary = vr_dictionary,
    ) -> None:
        self._elements: Tuple[DataElement, ...] = tuple(elements)
        self.path = path
        self.preamble = preamble
        self.position = position
        self.end = end
        self.errors: Tuple[DecodeError, ...] = tuple(errors)
        self.is_implicit_VR = is_implicit_VR
        self.dictionary = dictionary
        self.vr_dict = vr_dict

    @property
    def elements(self) -> Tuple[DataElement, ...]:
        """Return the decoded elements as a :class:`tuple`."""
        return self._elements

    @property
    def is_complete(self) -> bool:
        """Return ``True`` if every byte of the file was decoded.

        A file that stopped decoding early still holds all the elements
        found before the problem, see :attr:`errors`.
        """
        return self.position == self.end and not self.errors

    @property
    def transfer_syntax(self) -> Optional[UID]:
        """Return the (0002,0010) *Transfer Syntax UID* or ``None``."""
        elem = self.get(TransferSyntaxUIDTag.key)
        if elem is None or elem.value is None:
            return None

        return UID(convert_text(bytes(elem.value), is_padded=True))

    def lookup(self, name: Union[str, int]) -> DataElement:
        """Return the first element with a tag key or name matching `name`.

        Parameters
        ----------
        name : str or int
            An 8 character tag key such as ``'0020000D'``, the element's
            dictionary name such as ``'Study Instance UID'`` or its keyword
            such as ``'StudyInstanceUID'``. An :class:`int` is used as a
            tag.

        Returns
        -------
        DataElement
            The first matching element in stream order. Tag keys are
            matched before names.

        Raises
        ------
        KeyError
            If no element matches.
        """
        if isinstance(name, int):
            name = Tag(name).key

        key = name.upper()
        for elem in self._elements:
            if elem.key == key:
                return elem

        for elem in self._elements:
            if elem.name and elem.name == name:
                return elem

        for elem in self._elements:
            entry = self.dictionary.lookup(elem.tag)
            if entry and entry.keyword and entry.keyword == name:
                return elem

        raise KeyError(f"No element with tag or name '{name}' was decoded")

    def get(
        self, name: Union[str, int], default: Optional[DataElement] = None
    ) -> Optional[DataElement]:
        """Return the element matching `name` or `default` if not found.

        See :meth:`lookup` for how `name` is matched.
        """
        try:
            return self.lookup(name)
        except KeyError:
            return default

    def __contains__(self, name: Union[str, int]) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[DataElement]:
        return iter(self._elements)

    @overload
    def __getitem__(self, index: int) -> DataElement:
        pass  # pragma: no cover

    @overload
    def __getitem__(self, index: slice) -> Sequence[DataElement]:
        pass  # pragma: no cover

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[DataElement, Sequence[DataElement]]:
        """Return the element(s) at stream position `index`."""
        return self._elements[index]

    def __str__(self) -> str:
        """Return one display line per element."""
        return "\n".join(
            element_line(elem, vr_dict=self.vr_dict)
            for elem in self._elements
        )

    def __repr__(self) -> str:
        return (
            f"<DicomFile path={self.path!r} elements={len(self)} "
            f"complete={self.is_complete}>"
        )
