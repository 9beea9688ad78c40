# ruff: noqa

from .base import *
from .apps import *
from .database import *
from .drf import *
from .internationalization import *
from .logging import *
from .middleware import *
from .password import *
from .sentry import *
from .static import *
from .templates import *
