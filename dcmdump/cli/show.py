# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""dcmdump command line interface program for `dcmdump show`"""

from dcmdump import config
from dcmdump.cli.main import (
    filespec_help, filespec_parser, read_dicom_file, report_incomplete
)


def add_subparser(subparsers):
    subparser = subparsers.add_parser(
        "show", description="Display the data elements of a DICOM file"
    )
    subparser.add_argument(
        "filespec",
        help=filespec_help,
        type=filespec_parser
    )
    subparser.add_argument(
        "--debug",
        help="Log the decoding of each element to stderr",
        action="store_true",
    )
    mode = subparser.add_mutually_exclusive_group()
    mode.add_argument(
        "--implicit",
        help="Decode the whole file as implicit VR little endian",
        dest="is_implicit_VR",
        action="store_const",
        const=True,
    )
    mode.add_argument(
        "--explicit",
        help="Decode the whole file as explicit VR little endian",
        dest="is_implicit_VR",
        action="store_const",
        const=False,
    )
    subparser.add_argument(
        "-f",
        "--force",
        help="Decode from the first byte if the 'DICM' prefix is missing",
        action="store_true",
    )

    subparser.set_defaults(func=do_command, is_implicit_VR=None)


def do_command(args):
    if args.debug:
        config.debug(True)

    dicom_file = read_dicom_file(
        args.filespec, args.force, args.is_implicit_VR
    )
    if len(dicom_file):
        print(dicom_file)

    report_incomplete(dicom_file)
