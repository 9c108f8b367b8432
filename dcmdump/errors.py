# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Module for dcmdump exception classes"""


class InvalidDicomError(Exception):
    """Exception that is raised when the the file does not appear to be DICOM.

    Usually raised when the "DICM" prefix is not present at position 128 in
    the file.

    To force reading the file (because maybe it is a DICOM file without
    a header), use ``dcmread(..., force=True)``.
    """

    def __init__(self, *args):
        if not args:
            args = ('The specified file is not a valid DICOM file.', )
        Exception.__init__(self, *args)


class DecodeError(Exception):
    """Base class for structural problems met while decoding data elements.

    Parameters
    ----------
    msg : str
        The error message.
    offset : int, optional
        The buffer offset at which the problem was found.
    """

    def __init__(self, msg, offset=None):
        super().__init__(msg)
        self.offset = offset


class OutOfBoundsError(DecodeError, EOFError):
    """A fixed-width read would run past the buffer end or the read limit."""


class DelimiterNotFoundError(DecodeError, EOFError):
    """The end of an undefined length value could not be found."""


class UnresolvedVRError(DecodeError, ValueError):
    """An explicit VR code is neither known nor blank."""
