# ruff: noqa
"""Settings entry point: shared base values, then the overlay named by ``ENVIRONMENT``."""

from .base import *


if ENVIRONMENT == "local":
    from .local import *
elif ENVIRONMENT == "develop":
    from .develop import *
elif ENVIRONMENT == "test":
    from .test import *
