# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Decode the data elements of a DICOM media file held in memory"""

import os
from typing import (
    BinaryIO, Callable, Iterator, List, NamedTuple, Optional, Tuple, Union
)

from dcmdump import config
from dcmdump.config import logger
from dcmdump.datadict import (
    BLANK_VR, TagDictionary, VRDictionary, extra_length_VRs, tag_dictionary,
    vr_dictionary
)
from dcmdump.dataelem import DataElement
from dcmdump.dataset import DicomFile
from dcmdump.errors import DecodeError, InvalidDicomError, UnresolvedVRError
from dcmdump.fileutil import (
    BufferType, find_delimiter, path_from_pathlike, read_file_bytes,
    read_fixed, read_tag, read_UL, read_US
)
from dcmdump.misc import is_dicom
from dcmdump.tag import (
    BaseTag, ItemDelimiterTag, ItemTag, PixelDataTag, SequenceDelimiterTag,
    TransferSyntaxUIDTag, key_to_tag
)
from dcmdump.uid import UID
from dcmdump.util.dump import hexdump
from dcmdump.util.hexutil import bytes2hex
from dcmdump.values import convert_text

UNDEFINED_LENGTH = 0xFFFFFFFF

# tag + length of the Item or Sequence Delimitation Item that ends an
# undefined length value
DELIMITER_ITEM_LENGTH = 8


class DecodeResult(NamedTuple):
    """The outcome of decoding one nesting level of a buffer.

    Attributes
    ----------
    elements : list of DataElement
        The decoded elements in stream order. The elements of a sequence or
        sequence item follow directly after the container element.
    position : int
        The offset of the first byte that wasn't decoded.
    end : int
        The offset decoding was allowed to run up to.
    errors : list of DecodeError
        The problems that ended decoding early, at this level or in a nested
        level.
    """
    elements: List[DataElement]
    position: int
    end: int
    errors: List[DecodeError]

    @property
    def is_complete(self) -> bool:
        """Return ``True`` if all the bytes up to `end` were decoded."""
        return self.position == self.end and not self.errors


def _resolve_VR(
    raw_VR: memoryview, offset: int, vr_dict: VRDictionary
) -> str:
    """Return the explicit VR for the 2 bytes `raw_VR`.

    Two zero bytes are accepted as a blank VR ``'00'``.

    Raises
    ------
    UnresolvedVRError
        If `raw_VR` is neither blank nor in `vr_dict`.
    """
    VR = bytes(raw_VR).decode('latin-1')
    if VR in vr_dict:
        return VR

    if raw_VR == b'\x00\x00':
        return BLANK_VR

    raise UnresolvedVRError(
        f"Unknown VR '0x{bytes(raw_VR).hex()}' at offset 0x{offset:x}",
        offset
    )


def read_data_elements(
    buffer: BufferType,
    start: int = 0,
    is_implicit_VR: bool = False,
    limit: Optional[int] = None,
    *,
    depth: int = 0,
    stop_when: Optional[Callable[[BaseTag], bool]] = None,
    dictionary: TagDictionary = tag_dictionary,
    vr_dict: VRDictionary = vr_dictionary,
) -> DecodeResult:
    """Decode the data elements in `buffer` from `start` up to `limit`.

    Parameters
    ----------
    buffer : bytes-like
        The complete buffer. Element values are returned as views into it.
    start : int, optional
        The offset of the first element's tag.
    is_implicit_VR : bool, optional
        ``True`` if the elements are encoded as implicit VR little endian,
        ``False`` (default) for explicit VR little endian.
    limit : int, optional
        The offset decoding must not read past. Defaults to the end of
        `buffer`.
    depth : int, optional
        The nesting level of the elements, used for display only.
    stop_when : callable, optional
        Called with the tag of each element before anything else is read.
        If it returns ``True`` decoding stops and the returned ``position``
        is the offset of that tag.
    dictionary : TagDictionary, optional
        The dictionary used to name elements.
    vr_dict : VRDictionary, optional
        The dictionary of the explicit VRs that are accepted, also used
        to display the result.

    Returns
    -------
    DecodeResult
        The elements decoded, where decoding stopped and any problems met.

    Raises
    ------
    DecodeError
        Only if :attr:`config.enforce_valid_values` is ``True``; otherwise a
        malformed element ends decoding of its own nesting level and the
        problem is added to ``DecodeResult.errors``.
    """
    # Summary of DICOM standard PS3.5 chapter 7:
    # If Implicit VR, data element is:
    #    tag, 4-byte length, value.
    #        The 4-byte length can be FFFFFFFF (undefined length)*
    #
    # If Explicit VR:
    #    if OB, OD, OF, OL, OW, SQ, UC, UN, UR or UT:
    #       tag, VR, 2-bytes reserved (both zero), 4-byte length, value
    #   else: (any other VR)
    #       tag, VR, (2 byte length), value
    # * for undefined length, a Sequence Delimitation Item (or for an Item,
    #   an Item Delimitation Item) marks the end of the Value Field.
    view = memoryview(buffer).toreadonly()
    end = len(view) if limit is None else min(limit, len(view))

    # Make local variables so have faster lookup
    logger_debug = logger.debug
    debugging = config.debugging
    if debugging:
        logger_debug(
            "%08x: Decoding %s VR elements up to offset %08x (depth %d)",
            start, "implicit" if is_implicit_VR else "explicit", end, depth
        )

    elements: List[DataElement] = []
    errors: List[DecodeError] = []
    position = start
    while position <= end - 4:
        tag_start = position
        children = None
        try:
            key = read_tag(view, position, end)
            tag = key_to_tag(key)
            if stop_when is not None and stop_when(tag):
                if debugging:
                    logger_debug(
                        "%08x: Decoding ended by stop_when callback at %s",
                        tag_start, tag
                    )
                break

            position += 4
            entry = dictionary.lookup(tag)
            name = entry.name if entry else ''

            if is_implicit_VR:
                # VR is not in the stream and is not guessed
                VR = None
                length = read_UL(view, position, end)
                position += 4
            else:
                VR = _resolve_VR(
                    read_fixed(view, position, 2, end), position, vr_dict
                )
                position += 2
                if VR in extra_length_VRs:
                    # 2 reserved bytes
                    read_fixed(view, position, 2, end)
                    position += 2
                    length = read_UL(view, position, end)
                    position += 4
                else:
                    length = read_US(view, position, end)
                    position += 2

            value_start = position
            is_undefined_length = length == UNDEFINED_LENGTH
            if is_undefined_length:
                delimiters = [SequenceDelimiterTag]
                if tag == ItemTag:
                    delimiters.insert(0, ItemDelimiterTag)
                found_at = find_delimiter(view, value_start, end, delimiters)
                length = found_at - value_start

            if debugging:
                msg = "%08x: %-47s  %s %s Length: %d" % (
                    tag_start, bytes2hex(view[tag_start:value_start]), tag,
                    VR or "--", length
                )
                if is_undefined_length:
                    msg += " (undefined length)"
                logger_debug(msg)

            value_end = value_start + length
            value_stop = min(value_end, end)
            value = None
            if tag == ItemTag:
                children = read_data_elements(
                    view, value_start, False, value_stop, depth=depth + 1,
                    dictionary=dictionary, vr_dict=vr_dict
                )
            elif VR == 'SQ':
                children = read_data_elements(
                    view, value_start, True, value_stop, depth=depth + 1,
                    dictionary=dictionary, vr_dict=vr_dict
                )
            elif tag != PixelDataTag:
                value = view[value_start:value_stop]
                if debugging:
                    dotdot = "..." if length > 12 else "   "
                    displayed_value = bytes(value[:12])
                    logger_debug(
                        "%08x: %-34s %s %r %s", value_start,
                        bytes2hex(displayed_value), dotdot, displayed_value,
                        dotdot
                    )
        except DecodeError as exc:
            if config.enforce_valid_values:
                raise

            logger.warning(
                "%s - returning the %d element(s) decoded before offset "
                "0x%x", exc, len(elements), tag_start
            )
            if debugging:
                undecoded = view[tag_start:min(end, tag_start + 256)]
                logger_debug(
                    "Undecoded bytes:\n%s", hexdump(undecoded, tag_start)
                )
            errors.append(exc)
            position = tag_start
            break

        elements.append(
            DataElement(
                tag, VR, length, value, tag_start, name,
                is_undefined_length, depth
            )
        )
        if children is not None:
            elements.extend(children.elements)
            errors.extend(children.errors)

        position = value_end
        if is_undefined_length:
            position += DELIMITER_ITEM_LENGTH

    return DecodeResult(elements, position, end, errors)


def read_preamble(
    buffer: BufferType, force: bool = False
) -> Tuple[Optional[bytes], int]:
    """Return the 128-byte DICOM preamble in `buffer` if present.

    Parameters
    ----------
    buffer : bytes-like
        The complete file contents.
    force : bool, optional
        Flag to force reading of a file even if no header is found.

    Returns
    -------
    preamble : bytes or None
        The 128-byte DICOM preamble if the 'DICM' prefix is found at byte
        offset 128. ``None`` if the prefix is not found and `force` is
        ``True``.
    offset : int
        The offset of the first byte after the prefix, or ``0`` if there is
        no preamble.

    Raises
    ------
    InvalidDicomError
        If `force` is ``False`` and no appropriate header information found.
    """
    logger.debug("Reading File Meta Information preamble...")
    preamble = bytes(buffer[:128])
    magic = bytes(buffer[128:132])
    if config.debugging:
        sample = bytes2hex(preamble[:8]) + "..." + bytes2hex(preamble[-8:])
        logger.debug("{0:08x}: {1}".format(0, sample))

    if magic != b"DICM" and force:
        logger.info(
            "File is not conformant with the DICOM File Format: 'DICM' "
            "prefix is missing from the File Meta Information header "
            "or the header itself is missing. Assuming no header and "
            "continuing.")
        return None, 0

    if magic != b"DICM":
        raise InvalidDicomError("File is missing DICOM File Meta Information "
                                "header or the 'DICM' prefix is missing from "
                                "the header. Use force=True to force reading.")

    logger.debug("{0:08x}: 'DICM' prefix found".format(128))
    return preamble, 132


def transfer_syntax_is_implicit_VR(uid: Optional[str]) -> bool:
    """Return ``True`` if the data set for transfer syntax `uid` is implicit
    VR, ``False`` if explicit.

    Parameters
    ----------
    uid : str or None
        The *Transfer Syntax UID*, or ``None`` if the file doesn't have one,
        in which case :attr:`config.default_is_implicit_VR` is returned.

    Raises
    ------
    NotImplementedError
        For big endian and deflated transfer syntaxes.
    """
    if uid is None:
        return config.default_is_implicit_VR

    uid = UID(uid)
    if uid.is_private or not uid.is_transfer_syntax:
        # PS 3.5-2008 A.4 (p63): other syntax (e.g all compressed)
        #    should be Explicit VR Little Endian,
        return False

    if not uid.is_little_endian:
        raise NotImplementedError(
            "This reader does not handle big endian files"
        )

    if uid.is_deflated:
        raise NotImplementedError("This reader does not handle deflate files")

    return uid.is_implicit_VR


def _not_group_0002(tag: BaseTag) -> bool:
    """Return True if the tag is not in group 0x0002, False otherwise."""
    return tag.group != 2


def _transfer_syntax(elements: List[DataElement]) -> Optional[UID]:
    for elem in elements:
        if elem.tag == TransferSyntaxUIDTag and elem.value is not None:
            return UID(convert_text(bytes(elem.value), is_padded=True))

    return None


def read_buffer(
    buffer: BufferType,
    force: bool = False,
    is_implicit_VR: Optional[bool] = None,
    path: Optional[str] = None,
    *,
    dictionary: TagDictionary = tag_dictionary,
    vr_dict: VRDictionary = vr_dictionary,
) -> DicomFile:
    """Decode the complete contents of a DICOM file held in memory.

    Parameters
    ----------
    buffer : bytes-like
        The file contents, including the preamble and 'DICM' prefix.
    force : bool, optional
        If ``True`` decode `buffer` from offset 0 when the preamble and
        prefix are missing instead of raising an exception.
    is_implicit_VR : bool or None, optional
        If ``None`` (default) the *File Meta Information* is decoded as
        explicit VR and the rest of the buffer in the mode given by its
        *Transfer Syntax UID*. Otherwise the whole buffer is decoded in the
        given mode in one pass.
    path : str, optional
        The source of the buffer, stored in the result.
    dictionary : TagDictionary, optional
        The dictionary used to name elements.
    vr_dict : VRDictionary, optional
        The dictionary of the explicit VRs that are accepted.

    Returns
    -------
    DicomFile
        The decoded elements.

    Raises
    ------
    InvalidDicomError
        If `force` is ``False`` and the 'DICM' prefix is missing.
    NotImplementedError
        If the transfer syntax is big endian or deflated.
    """
    preamble, start = read_preamble(buffer, force)
    kwargs = {"dictionary": dictionary, "vr_dict": vr_dict}

    if is_implicit_VR is not None:
        result = read_data_elements(buffer, start, is_implicit_VR, **kwargs)
        return DicomFile(
            result.elements, path, preamble=preamble,
            position=result.position, end=result.end, errors=result.errors,
            is_implicit_VR=is_implicit_VR, **kwargs
        )

    # File Meta elements are always Explicit VR Little Endian
    meta = read_data_elements(
        buffer, start, False, stop_when=_not_group_0002, **kwargs
    )
    if meta.errors:
        return DicomFile(
            meta.elements, path, preamble=preamble, position=meta.position,
            end=meta.end, errors=meta.errors, is_implicit_VR=False, **kwargs
        )

    transfer_syntax = _transfer_syntax(meta.elements)
    if transfer_syntax is None:
        logger.info(
            "No (0002,0010) 'Transfer Syntax UID' found, decoding the data "
            "set as %s VR",
            "implicit" if config.default_is_implicit_VR else "explicit"
        )
    is_implicit_VR = transfer_syntax_is_implicit_VR(transfer_syntax)

    dataset = read_data_elements(
        buffer, meta.position, is_implicit_VR, **kwargs
    )
    return DicomFile(
        meta.elements + dataset.elements, path, preamble=preamble,
        position=dataset.position, end=dataset.end, errors=dataset.errors,
        is_implicit_VR=is_implicit_VR, **kwargs
    )


def dcmread(
    fp: Union[str, "os.PathLike[str]", BinaryIO],
    force: bool = False,
    is_implicit_VR: Optional[bool] = None,
    *,
    dictionary: TagDictionary = tag_dictionary,
    vr_dict: VRDictionary = vr_dictionary,
) -> DicomFile:
    """Read and decode a DICOM file.

    The whole file is read into memory before any decoding starts.

    Parameters
    ----------
    fp : str or PathLike or file-like
        Either a binary file-like object, or a string containing the file
        name. If a file-like object, the caller is responsible for closing
        it.
    force : bool, optional
        If ``False`` (default), raises an
        :class:`~dcmdump.errors.InvalidDicomError` if the file is missing the
        preamble and 'DICM' prefix. Set to ``True`` to decode the file from
        its first byte in that case.
    is_implicit_VR : bool or None, optional
        See :func:`read_buffer`.
    dictionary : TagDictionary, optional
        The dictionary used to name elements.
    vr_dict : VRDictionary, optional
        The dictionary of the explicit VRs that are accepted.

    Returns
    -------
    DicomFile
        The decoded elements.

    Examples
    --------
    >>> from dcmdump import dcmread
    >>> df = dcmread("CT_small.dcm")
    >>> df.lookup("PatientName")
    """
    path = path_from_pathlike(fp)
    if not isinstance(path, str):
        path = getattr(fp, "name", None)

    logger.debug("Reading file '{0}'".format(path))
    buffer = read_file_bytes(fp)

    return read_buffer(
        buffer, force, is_implicit_VR, path,
        dictionary=dictionary, vr_dict=vr_dict
    )


def iter_dicom_paths(folder: Union[str, "os.PathLike[str]"]) -> Iterator[str]:
    """Yield the path of each file in `folder` with the 'DICM' prefix.

    Sub-directories are searched as well, in sorted order. Files that
    can't be opened are logged and skipped.
    """
    for root, dirs, files in os.walk(folder):
        dirs.sort()
        for filename in sorted(files):
            path = os.path.join(root, filename)
            try:
                found = is_dicom(path)
            except OSError as exc:
                logger.warning("Skipping '{0}': {1}".format(path, exc))
                continue

            if not found:
                logger.debug("Skipping '{0}', not a DICOM file".format(path))
                continue

            yield path


def walk_dicom_files(
    folder: Union[str, "os.PathLike[str]"]
) -> Iterator[DicomFile]:
    """Yield a decoded :class:`DicomFile` for each DICOM file in `folder`.

    Sub-directories are searched as well. Files without the 'DICM' prefix
    are skipped.

    Parameters
    ----------
    folder : str or PathLike
        The directory to search.
    """
    for path in iter_dicom_paths(folder):
        yield dcmread(path)
