
"""
Command line model: ``--name=value`` / ``--name`` options plus positional
arguments, optionally augmented from an auxiliary arguments file.

Parsing is a left fold of raw tokens onto an immutable :class:`CommandLine`.
Every merge is first-write-wins: an option key that is already bound keeps
its value and a positional argument that was already seen is dropped, so a
later source (the arguments file) can only add, never override.
"""

from dataclasses import dataclass, field, replace
from functools import reduce
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .option_parser import parse_option
from .args_file import resolve_location, read_lines
from .logger import logger


OPTION_PREFIX = "--"
NEGATION_PREFIX = "no"

ARGS_OPTION = "args"

TRUE = "true"
FALSE = "false"


@dataclass(frozen=True)
class CommandLine:
    options: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    arguments: Tuple[str, ...] = ()

    def get_option(self, key: str) -> Optional[str]:
        return self.options.get(key)

    def get_arguments(self) -> Sequence[str]:
        return self.arguments

    def with_option(self, key: str, value: str) -> "CommandLine":
        if key in self.options:
            logger.debug("Option %r already set, ignoring value %r.", key, value)
            return self
        options = dict(self.options)
        options[key] = value
        return replace(self, options=MappingProxyType(options))

    def with_argument(self, arg: str) -> "CommandLine":
        if arg in self.arguments:
            logger.debug("Argument %r already present, ignoring.", arg)
            return self
        return replace(self, arguments=self.arguments + (arg,))

    def extend(self, raw_args: Iterable[str]) -> "CommandLine":
        return parse_tokens(raw_args, base=self)

    def __str__(self) -> str:
        args = "".join(f"[{arg}]" for arg in self.arguments)
        opts = "".join(f"[{key}={value}]" for key, value in self.options.items())
        return f"Arguments: {args}Options: {opts}"


EMPTY = CommandLine()


def _negated_key(key: str) -> Optional[str]:
    if key.startswith(NEGATION_PREFIX) and len(key) > len(NEGATION_PREFIX):
        rest = key[len(NEGATION_PREFIX):]
        return rest[0].lower() + rest[1:]
    return None


def _add_option(command_line: CommandLine, arg: str) -> CommandLine:
    text = arg[len(OPTION_PREFIX):].strip()
    option = parse_option(text)
    if option is None:
        logger.debug("Discarding empty option %r.", arg)
        return command_line

    if not option.is_flag:
        assert option.value is not None
        return command_line.with_option(option.key, option.value)

    actual_key = _negated_key(option.key)
    if actual_key is None:
        return command_line.with_option(option.key, TRUE)

    if option.key in command_line.options:
        logger.debug("Option %r already set, ignoring negation.", option.key)
        return command_line
    return command_line.with_option(actual_key, FALSE)


def _add_token(command_line: CommandLine, arg: str) -> CommandLine:
    if arg.startswith(OPTION_PREFIX):
        return _add_option(command_line, arg)
    return command_line.with_argument(arg)


def parse_tokens(raw_args: Iterable[str], base: CommandLine = EMPTY) -> CommandLine:
    """Fold ``raw_args`` onto ``base`` without touching any arguments file."""
    return reduce(_add_token, raw_args, base)


def merge_args_file(command_line: CommandLine) -> CommandLine:
    """
    Merge the auxiliary arguments file into ``command_line``, if there is one.

    The file is located through the ``args`` option or, failing that, a
    ``runner.args`` file in the working directory.  Its non-blank lines are
    parsed as if they followed the original tokens on the command line.
    """

    location = resolve_location(command_line.get_option(ARGS_OPTION))
    if location is None:
        return command_line
    logger.info("Merging arguments from %r.", location)
    return command_line.extend(read_lines(location))


def parse(raw_args: Sequence[str]) -> CommandLine:
    """
    Top-level entry point: parse ``raw_args`` and merge the arguments file.

    Raises MalformedArgsLocation or ArgsFileUnreadable; either one means no
    usable command line could be built.
    """

    return merge_args_file(parse_tokens(raw_args))
