"""Signal handlers for HRM app."""

from apps.hrm.constants import TEMP_CODE_PREFIX
from apps.hrm.models import Department, Employee
from libs.code_generation import register_auto_code_signal

register_auto_code_signal(
    Department,
    Employee,
    temp_code_prefix=TEMP_CODE_PREFIX,
)
