# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Access dicom dictionary information

Three read-only lookup tables are used while decoding and displaying data
elements:

* :class:`TagDictionary` -- tag key to name, VR, VM and keyword
* :class:`VRDictionary` -- VR code to its fixed size, width and padding
* :class:`TransferSyntaxDictionary` -- UID to its name

Each is built once from the module level tables and then only consulted.
The default instances are :data:`tag_dictionary`, :data:`vr_dictionary` and
:data:`transfer_syntax_dictionary`.
"""
from typing import Dict, NamedTuple, Optional, Tuple, Union

from dcmdump._dicom_dict import DicomDictionary
from dcmdump._uid_dict import UID_dictionary
from dcmdump._vr_dict import VR_dictionary
from dcmdump.tag import Tag, BaseTag

TagType = Union[int, str, Tuple[int, int], BaseTag]

# VRs whose explicit encoding has 2 reserved bytes and a 4-byte length
extra_length_VRs = (
    'OB', 'OD', 'OF', 'OL', 'OW', 'SQ', 'UC', 'UN', 'UR', 'UT'
)

# Synthetic VR used for an explicit VR field of two zero bytes
BLANK_VR = '00'


class TagEntry(NamedTuple):
    VR: str
    VM: str
    name: str
    is_retired: str
    keyword: str


class VREntry(NamedTuple):
    is_fixed_size: bool
    width: int
    is_padded: bool


class UIDEntry(NamedTuple):
    name: str
    type: str
    info: str
    is_retired: str
    keyword: str


class TagDictionary:
    """Lookup of data element tags.

    Parameters
    ----------
    entries : dict, optional
        :class:`dict` of form
        ``{tag: (VR, VM, description, is_retired, keyword), ...}``. If not
        used then the built-in dictionary is used.

    Examples
    --------

    >>> tags = TagDictionary()
    >>> tags.lookup('00080018').name
    'SOP Instance UID'
    >>> tags.lookup('00091001') is None
    True
    """

    def __init__(self, entries: Optional[Dict[int, tuple]] = None) -> None:
        if entries is None:
            entries = DicomDictionary

        self._entries = {
            BaseTag(tag): TagEntry(*value) for tag, value in entries.items()
        }
        self._keywords = {
            entry.keyword: tag for tag, entry in self._entries.items()
        }

    def __contains__(self, tag: TagType) -> bool:
        return self.lookup(tag) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, tag: TagType) -> Optional[TagEntry]:
        """Return the entry for `tag` or ``None`` if it isn't known.

        Parameters
        ----------
        tag : int or str or 2-tuple
            The tag as an 8 character tag key, an :class:`int` or a
            (group, element) tuple.
        """
        try:
            tag = Tag(tag)
        except (ValueError, OverflowError):
            return None

        return self._entries.get(tag)

    def tag_for_keyword(self, keyword: str) -> Optional[BaseTag]:
        """Return the tag with `keyword` or ``None`` if not found."""
        return self._keywords.get(keyword)


class VRDictionary:
    """Lookup of value representation codes.

    Parameters
    ----------
    entries : dict, optional
        :class:`dict` of form ``{VR: (is_fixed_size, width, is_padded)}``.
        If not used then the built-in table is used.
    """

    def __init__(self, entries: Optional[Dict[str, tuple]] = None) -> None:
        if entries is None:
            entries = VR_dictionary

        self._entries = {
            vr: VREntry(*value) for vr, value in entries.items()
        }

    def __contains__(self, VR: str) -> bool:
        return VR in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, VR: Optional[str]) -> Optional[VREntry]:
        """Return the entry for the 2 character `VR` or ``None``."""
        return self._entries.get(VR)  # type: ignore


class TransferSyntaxDictionary:
    """Lookup of UIDs, used to name the transfer syntax of a file.

    Parameters
    ----------
    entries : dict, optional
        :class:`dict` of form
        ``{UID: (name, type, info, is_retired, keyword)}``. If not used then
        the built-in table is used.
    """

    def __init__(self, entries: Optional[Dict[str, tuple]] = None) -> None:
        if entries is None:
            entries = UID_dictionary

        self._entries = {
            uid: UIDEntry(*value) for uid, value in entries.items()
        }

    def __contains__(self, uid: str) -> bool:
        return uid in self._entries

    def lookup(self, uid: str) -> Optional[UIDEntry]:
        """Return the entry for `uid` or ``None`` if it isn't known."""
        return self._entries.get(uid)


tag_dictionary = TagDictionary()
vr_dictionary = VRDictionary()
transfer_syntax_dictionary = TransferSyntaxDictionary()


def keyword_for_tag(tag: TagType) -> str:
    """Return the keyword of the element corresponding to `tag`, or an empty
    string if the tag isn't known.
    """
    entry = tag_dictionary.lookup(tag)
    return entry.keyword if entry else ""


def tag_for_keyword(keyword: str) -> Optional[BaseTag]:
    """Return the tag of the element corresponding to `keyword`, or ``None``
    if the keyword isn't known.
    """
    return tag_dictionary.tag_for_keyword(keyword)
