"""Transaction identifiers for uploaded images."""

import logging
import random

log = logging.getLogger(__name__)

PREFIX = "TRANX"
_LOWEST = 10000
_HIGHEST = 99999

_rng = random.SystemRandom()


def generate_transaction_id() -> str:
    """Return a new identifier of the form ``TRANX`` followed by five digits."""
    identifier = f"{PREFIX}{_rng.randint(_LOWEST, _HIGHEST)}"
    log.debug("generated transaction id %s", identifier)
    return identifier