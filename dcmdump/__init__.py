# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""dcmdump package -- list the data elements of DICOM files.
   See Quick Start below.

-----------
Quick Start
-----------

1. A simple program to list the elements of a file::

    from dcmdump import dcmread
    dicom_file = dcmread("file1.dcm")
    print(dicom_file)

2. Look up a single element by tag key, name or keyword::

    elem = dicom_file.lookup("00100010")
    elem = dicom_file.lookup("Patient's Name")
    print(elem.repval)

3. Decode a raw buffer of data elements, without a preamble::

    from dcmdump import read_data_elements
    result = read_data_elements(buffer, is_implicit_VR=True)
    if not result.is_complete:
        print(result.errors)

4. From the command line::

    dcmdump show file1.dcm
"""

from dcmdump.dataelem import DataElement
from dcmdump.dataset import DicomFile
from dcmdump.filereader import (
    DecodeResult, dcmread, read_buffer, read_data_elements, walk_dicom_files
)

from ._version import __version__, __version_info__

__all__ = [
    "DataElement",
    "DecodeResult",
    "DicomFile",
    "dcmread",
    "read_buffer",
    "read_data_elements",
    "walk_dicom_files",
    "__version__",
    "__version_info__",
]
