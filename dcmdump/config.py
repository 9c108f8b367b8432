# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""dcmdump configuration options."""

# doc strings following items are picked up by sphinx for documentation

import logging


enforce_valid_values = False
"""Raise decoding errors instead of returning the elements read so far.

By default a malformed element (an unknown explicit VR, a read past the end
of the buffer or a missing undefined length delimiter) ends decoding of the
current nesting level only; the error is logged and kept in
:attr:`~dcmdump.filereader.DecodeResult.errors`.

Default ``False``.
"""

default_is_implicit_VR = False
"""Decoding mode used for the data set when the file has no
(0002,0010) *Transfer Syntax UID* and the caller gives no mode.

Default ``False`` (explicit VR).
"""

max_display_length = 128
"""Values with a length of at least this many bytes are shown as ``...``
by :func:`~dcmdump.util.dump.element_line`.

Default ``128``.
"""

# Logging system and debug function to change logging level
logger = logging.getLogger('dcmdump')
logger.addHandler(logging.NullHandler())


def debug(debug_on=True, default_handler=True):
    """Turn on/off debugging of DICOM data element decoding.

    When debugging is on, buffer offsets and details about the elements
    decoded at those offsets are logged to the 'dcmdump' logger using
    Python's :mod:`logging` module.

    Parameters
    ----------
    debug_on : bool, optional
        If ``True`` (default) then turn on debugging, ``False`` to turn off.
    default_handler : bool, optional
        If ``True`` (default) then use :class:`logging.StreamHandler` as the
        handler for log messages.
    """
    global logger, debugging

    if default_handler:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if debug_on:
        logger.setLevel(logging.DEBUG)
        debugging = True
    else:
        logger.setLevel(logging.WARNING)
        debugging = False


# force level=WARNING, in case logging default is set differently (issue 103)
debug(False, False)
