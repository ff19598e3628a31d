"""Terminal browser for Google Cloud Secret Manager."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
