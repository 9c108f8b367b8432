# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Value Representations of DICOM Standard Part 5, Table 6.2-1.

Only VRs whose explicit encoding this reader handles are listed. The 64-bit
VRs OV, SV and UV use the long (reserved + 4 byte) length form but are not
among the long form VRs the decoder reads, so they are left out and an
element using one ends decoding like any other unknown VR.

Dict of {VR: (is_fixed_size, width, is_padded)}

``width`` is the size in bytes of a single value for the fixed size VRs
and ``0`` for the others. ``is_padded`` marks the VRs whose values may end
in a single padding byte to keep the value length even.
"""

VR_dictionary = {
    'AE': (False, 0, True),
    'AS': (False, 0, True),
    'AT': (True, 2, False),
    'CS': (False, 0, True),
    'DA': (False, 0, True),
    'DS': (False, 0, True),
    'DT': (False, 0, True),
    'FD': (True, 8, False),
    'FL': (True, 4, False),
    'IS': (False, 0, True),
    'LO': (False, 0, True),
    'LT': (False, 0, True),
    'OB': (True, 1, True),
    'OD': (True, 8, False),
    'OF': (True, 4, False),
    'OL': (True, 4, False),
    'OW': (True, 2, False),
    'PN': (False, 0, True),
    'SH': (False, 0, True),
    'SL': (True, 4, False),
    'SQ': (False, 0, False),
    'SS': (True, 2, False),
    'ST': (False, 0, True),
    'TM': (False, 0, True),
    'UC': (False, 0, True),
    'UI': (False, 0, True),
    'UL': (True, 4, False),
    'UN': (False, 0, False),
    'UR': (False, 0, True),
    'US': (True, 2, False),
    'UT': (False, 0, True),
}
