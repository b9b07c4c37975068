
from typing import Sequence
import logging

from .command_line import CommandLine, TRUE, parse_tokens
from .logger import logger


def _is_set(command_line: CommandLine, key: str) -> bool:
    return command_line.get_option(key) == TRUE


def parse_cli(args: Sequence[str]) -> CommandLine:
    """Parse ``args`` without the arguments file and apply the verbosity options."""

    ret = parse_tokens(args)
    if _is_set(ret, "quiet"):
        logger.setLevel(logging.ERROR)
    elif _is_set(ret, "verbose"):
        logger.setLevel(logging.INFO)
    elif _is_set(ret, "debug"):
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARN)

    logger.debug("Start.")

    return ret
