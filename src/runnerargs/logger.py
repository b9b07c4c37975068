
import logging
import sys


logger = logging.getLogger("runnerargs")

_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
logger.addHandler(_handler)
logger.setLevel(logging.WARNING)
