# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Functions for handling DICOM unique identifiers (UIDs)"""

from typing import TypeVar, Type

from dcmdump.datadict import transfer_syntax_dictionary


_UID = TypeVar("_UID", bound="UID")


class UID(str):
    """Human friendly UIDs as a Python :class:`str` subclass.

    Trailing NUL and space padding is removed on creation.

    Examples
    --------

    >>> from dcmdump.uid import UID
    >>> uid = UID('1.2.840.10008.1.2.4.50\\x00')
    >>> uid
    '1.2.840.10008.1.2.4.50'
    >>> uid.is_implicit_VR
    False
    >>> uid.is_transfer_syntax
    True
    >>> uid.name
    'JPEG Baseline (Process 1)'
    """
    def __new__(cls: Type[_UID], val: str) -> _UID:
        """Setup new instance of the class.

        Parameters
        ----------
        val : str or dcmdump.uid.UID
            The UID string to use to create the UID object.

        Returns
        -------
        dcmdump.uid.UID
            The UID object.
        """
        if isinstance(val, str):
            return super().__new__(cls, val.strip().rstrip('\x00'))

        raise TypeError("A UID must be created from a string")

    @property
    def is_implicit_VR(self) -> bool:
        """Return ``True`` if an implicit VR transfer syntax UID."""
        if self.is_transfer_syntax:
            # Implicit VR Little Endian
            if self == ImplicitVRLittleEndian:
                return True

            # Explicit VR Little Endian
            # Explicit VR Big Endian
            # Deflated Explicit VR Little Endian
            # All encapsulated transfer syntaxes
            return False

        raise ValueError('UID is not a transfer syntax.')

    @property
    def is_little_endian(self) -> bool:
        """Return ``True`` if a little endian transfer syntax UID."""
        if self.is_transfer_syntax:
            return self != ExplicitVRBigEndian

        raise ValueError('UID is not a transfer syntax.')

    @property
    def is_deflated(self) -> bool:
        """Return ``True`` if a deflated transfer syntax UID."""
        if self.is_transfer_syntax:
            return self == DeflatedExplicitVRLittleEndian

        raise ValueError('UID is not a transfer syntax.')

    @property
    def is_transfer_syntax(self) -> bool:
        """Return ``True`` if a transfer syntax UID."""
        if not self.is_private:
            return self.type == "Transfer Syntax"

        raise ValueError("Can't determine UID type for private UIDs.")

    @property
    def name(self) -> str:
        """Return the UID name from the UID dictionary."""
        entry = transfer_syntax_dictionary.lookup(self)
        return entry.name if entry else str(self)

    @property
    def type(self) -> str:
        """Return the UID type from the UID dictionary."""
        entry = transfer_syntax_dictionary.lookup(self)
        return entry.type if entry else ''

    @property
    def is_private(self) -> bool:
        """Return ``True`` if the UID isn't an officially registered DICOM
        UID.
        """
        return self[:14] != '1.2.840.10008.'


# Pre-defined Transfer Syntax UIDs (for convenience)
ImplicitVRLittleEndian = UID('1.2.840.10008.1.2')
"""1.2.840.10008.1.2"""
ExplicitVRLittleEndian = UID('1.2.840.10008.1.2.1')
"""1.2.840.10008.1.2.1"""
DeflatedExplicitVRLittleEndian = UID('1.2.840.10008.1.2.1.99')
"""1.2.840.10008.1.2.1.99"""
ExplicitVRBigEndian = UID('1.2.840.10008.1.2.2')
"""1.2.840.10008.1.2.2"""
