import argparse
import os
import sys

from vhdlbd import (
    MissingArgumentsError,
    UnreadableFileError,
    VBDError,
    VHDLPortParser,
    get_block_diagram,
)


def _is_readable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


def cmd_diagram(args: argparse.Namespace) -> int:
    """Print an ASCII block diagram for each file's entity.

    When several files are given each diagram is preceded by the file
    name and followed by a blank line.  The first file that cannot be
    read or parsed ends the run.
    """
    files = getattr(args, "files", None)
    if not files:
        sys.exit(str(MissingArgumentsError()))

    parser = VHDLPortParser()

    for index, filename in enumerate(files):
        if index:
            print()
        if len(files) > 1:
            print(filename)

        try:
            if not _is_readable(filename):
                raise UnreadableFileError(filename)
            result = parser.parse_file(filename)
        except VBDError as exc:
            sys.exit(str(exc))

        for line in get_block_diagram(result.inputs, result.outputs):
            print(line)

    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vbd",
        description="Generate ASCII block diagrams from VHDL entity port declarations.",
        add_help=False,
    )
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="VHDL file to draw. Ports must be std_logic or std_logic_vector, one per line.",
    )
    parser.set_defaults(func=cmd_diagram)

    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    # Every argument is a file path, even one starting with "-"
    args = parser.parse_args(["--"] + list(argv))

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
