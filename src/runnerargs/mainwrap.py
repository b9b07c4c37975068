
import sys
from typing import Callable, Optional, Sequence

from .user_error import UserError
from .logger import logger


def mainwrap(main: Callable[[Sequence[str]], int],
             argv: Optional[Sequence[str]] = None) -> None:
    """Run ``main`` and exit with its return code, or the code of a UserError."""

    if argv is None:
        argv = sys.argv[1:]

    try:
        rc = main(argv)
        logger.debug("Done (%r).", rc)
    except BrokenPipeError:
        logger.debug("Broken pipe.")
        rc = 1
    except KeyboardInterrupt:
        logger.debug("Interrupted.")
        rc = 1
    except UserError as e:
        logger.fatal("Cannot build command line: %s", e.message)
        rc = e.code

    sys.exit(rc)
