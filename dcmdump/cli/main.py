# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""dcmdump command line interface program

Each subcommand is a module within dcmdump.cli, which
defines an add_subparser(subparsers) function to set argparse
attributes, and calls set_defaults(func=callback_function)

"""

import argparse
from importlib.metadata import entry_points
import os
import sys
from typing import Callable, Dict, Optional

from dcmdump import dcmread
from dcmdump.dataset import DicomFile
from dcmdump.errors import InvalidDicomError


subparsers: Optional[argparse._SubParsersAction] = None

filespec_help = (
    "Path to a DICOM file.\n"
    "Examples:\n"
    "   path/to/your_file.dcm\n"
    "   path/to/folder/IM00001\n"
)


def filespec_parser(filespec: str) -> str:
    """Utility to check that a command line file argument is a file.

    Note: this is used as an argparse 'type' for adding parsing arguments.

    Parameters
    ----------
    filespec : str
        The path given on the command line.

    Returns
    -------
    str
        The unchanged path.

    Raises
    ------
    argparse.ArgumentTypeError
        If the path does not exist or is not a regular file.
    """
    if not os.path.exists(filespec):
        raise argparse.ArgumentTypeError(f"File '{filespec}' not found")

    if not os.path.isfile(filespec):
        raise argparse.ArgumentTypeError(f"'{filespec}' is not a file")

    return filespec


def folder_parser(folder: str) -> str:
    """Utility to check that a command line folder argument is a directory.

    Note: this is used as an argparse 'type' for adding parsing arguments.
    """
    if not os.path.isdir(folder):
        raise argparse.ArgumentTypeError(f"Folder '{folder}' not found")

    return folder


def read_dicom_file(
    filename: str,
    force: bool = False,
    is_implicit_VR: Optional[bool] = None,
) -> DicomFile:
    """Decode `filename`, exiting with status 1 if it can't be read."""
    try:
        return dcmread(filename, force=force, is_implicit_VR=is_implicit_VR)
    except InvalidDicomError as e:
        print(f"Error reading '{filename}': {e}", file=sys.stderr)
    except (NotImplementedError, OSError) as e:
        print(f"Unable to decode '{filename}': {e}", file=sys.stderr)

    sys.exit(1)


def report_incomplete(dicom_file: DicomFile) -> None:
    """Write a warning to stderr if `dicom_file` was only partly decoded."""
    if dicom_file.is_complete:
        return

    print(
        f"Warning: decoding of '{dicom_file.path}' stopped at offset "
        f"{dicom_file.position} of {dicom_file.end}",
        file=sys.stderr
    )
    for error in dicom_file.errors:
        print(f"    {error}", file=sys.stderr)


def help_command(args: argparse.Namespace) -> None:
    if subparsers is None:
        print("No subcommands are available")
        return

    subcommands = list(subparsers.choices.keys())
    if args.subcommand and args.subcommand in subcommands:
        subparsers.choices[args.subcommand].print_help()
    else:
        print("Use dcmdump help [subcommand] to show help for a subcommand")
        subcommands.remove("help")
        print(f"Available subcommands: {', '.join(subcommands)}")


SubCommandType = Dict[str, Callable[[argparse._SubParsersAction], None]]


def get_subcommands() -> SubCommandType:
    """Return the subcommand registration functions by subcommand name.

    The built-in subcommands are always available; installed packages can
    add their own through the ``dcmdump_subcommands`` entry point group.
    """
    from dcmdump.cli import lookup, scan, show

    subcommands = {
        "show": show.add_subparser,
        "lookup": lookup.add_subparser,
        "scan": scan.add_subparser,
    }
    for entry_point in entry_points(group="dcmdump_subcommands"):
        subcommands[entry_point.name] = entry_point.load()

    return subcommands


def main(args=None):
    """Entry point for 'dcmdump' command line interface

    Parameters
    ----------
    args : List[str], optional
        Command-line arguments to parse.  If ``None``, then :attr:`sys.argv`
        is used.
    """
    global subparsers

    py_version = sys.version.split()[0]

    parser = argparse.ArgumentParser(
        prog="dcmdump",
        description=f"List the data elements of DICOM files "
        f"(Python {py_version})",
    )
    subparsers = parser.add_subparsers(help="subcommand help")

    help_parser = subparsers.add_parser(
        "help", help="display help for subcommands"
    )
    help_parser.add_argument(
        "subcommand", nargs="?", help="Subcommand to show help for"
    )
    help_parser.set_defaults(func=help_command)

    # Get subcommands to register themselves as a subparser
    subcommands = get_subcommands()
    for subcommand in subcommands.values():
        subcommand(subparsers)

    ns = parser.parse_args(args)
    if not vars(ns):
        parser.print_help()
    else:
        ns.func(ns)
