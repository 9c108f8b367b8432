# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""dcmdump command line interface program for `dcmdump scan`"""

from dcmdump.cli.main import folder_parser, report_incomplete
from dcmdump.filereader import dcmread, iter_dicom_paths


def add_subparser(subparsers):
    subparser = subparsers.add_parser(
        "scan",
        description="Summarise every DICOM file in a folder and its "
        "sub-folders"
    )
    subparser.add_argument(
        "folder",
        help="The folder to search for files with the 'DICM' prefix",
        type=folder_parser
    )

    subparser.set_defaults(func=do_command)


def summary(dicom_file):
    """Return the one line summary of a decoded file."""
    transfer_syntax = dicom_file.transfer_syntax
    if transfer_syntax is None:
        syntax_name = "no transfer syntax"
    else:
        syntax_name = transfer_syntax.name

    return f"{dicom_file.path}: {len(dicom_file)} elements, {syntax_name}"


def do_command(args):
    for path in iter_dicom_paths(args.folder):
        try:
            dicom_file = dcmread(path)
        except (NotImplementedError, OSError) as e:
            print(f"{path}: {e}")
            continue

        print(summary(dicom_file))
        report_incomplete(dicom_file)
