"""
Where secret codes come from.
- local_code: independent uniform draws from the OS secure random generator
- fetch_code: the same draws from random.org over HTTP; if anything goes wrong
  (no internet, timeout, bad response), we fall back to local_code so the
  game still starts.
"""

import logging
from secrets import randbelow

import requests

from .config import RANDOM_ORG_TIMEOUT
from .types import COLORS, PEGS, Code

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


def local_code(length: int = PEGS, colors: int = COLORS) -> Code:
    # randbelow(colors) gives a number between 0 and colors - 1
    return [randbelow(colors) for _ in range(length)]


def fetch_code(length: int = PEGS, colors: int = COLORS) -> Code:
    params = {
        "num": length,      # how many pegs we want
        "min": 0,           # smallest color
        "max": colors - 1,  # largest color
        "col": 1,           # one number per line
        "base": 10,
        "format": "plain",
        "rnd": "new",       # always generate new numbers
    }

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=RANDOM_ORG_TIMEOUT)
        response.raise_for_status()

        # The body looks like:
        #   0\n3\n1\n2\n
        code = [int(line) for line in response.text.split() if line.strip()]

        if len(code) != length:
            raise ValueError(f"random.org returned {len(code)} values, expected {length}.")
        for color in code:
            if not 0 <= color < colors:
                raise ValueError(f"random.org number {color} out of range 0..{colors - 1}.")

        return code

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local generator", exc)
        return local_code(length, colors)
