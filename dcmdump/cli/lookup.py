# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""dcmdump command line interface program for `dcmdump lookup`"""

import sys

from dcmdump.cli.main import filespec_help, filespec_parser, read_dicom_file


def add_subparser(subparsers):
    subparser = subparsers.add_parser(
        "lookup",
        description="Display the first data element matching a tag key "
        "(e.g. 00100010), name (e.g. \"Patient's Name\") or keyword"
    )
    subparser.add_argument(
        "filespec",
        help=filespec_help,
        type=filespec_parser
    )
    subparser.add_argument("name", help="Tag key, name or keyword to find")
    subparser.add_argument(
        "-f",
        "--force",
        help="Decode from the first byte if the 'DICM' prefix is missing",
        action="store_true",
    )

    subparser.set_defaults(func=do_command)


def do_command(args):
    dicom_file = read_dicom_file(args.filespec, args.force)
    elem = dicom_file.get(args.name)
    if elem is None:
        print(
            f"No element '{args.name}' found in '{args.filespec}'",
            file=sys.stderr
        )
        sys.exit(1)

    print(elem)
