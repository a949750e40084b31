"""Snake on a fixed tick, drawn in the terminal or a pygame window."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
