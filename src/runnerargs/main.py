
import sys
from typing import Sequence, TextIO
from .mainwrap import mainwrap
from .parsecli import parse_cli
from .command_line import CommandLine, merge_args_file


def dump(command_line: CommandLine, out: TextIO) -> None:
    for key in sorted(command_line.options):
        print(f"{key}={command_line.options[key]}", file=out)
    for arg in command_line.get_arguments():
        print(arg, file=out)


def main(argv: Sequence[str]) -> int:
    command_line = merge_args_file(parse_cli(argv))
    dump(command_line, sys.stdout)
    return 0


def cli() -> None:
    mainwrap(main)


if __name__ == "__main__": cli()  # noqa
