"""Give roles their final ``VT###`` code once the row has an id."""

from apps.core.models import Role
from libs.code_generation import register_auto_code_signal

register_auto_code_signal(Role, temp_code_prefix=Role.TEMP_CODE_PREFIX)
