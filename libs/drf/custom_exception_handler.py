import sentry_sdk
from django.core.exceptions import ValidationError as DjangoValidationError
from drf_standardized_errors.handler import exception_handler as drf_exception_handler
from rest_framework.exceptions import ValidationError


def _as_drf_validation_error(exc: DjangoValidationError) -> ValidationError:
    if hasattr(exc, "error_dict"):
        return ValidationError(exc.message_dict)
    return ValidationError(exc.messages)


def exception_handler(exc, context):
    # Business rules in services raise Django's ValidationError
    if isinstance(exc, DjangoValidationError):
        exc = _as_drf_validation_error(exc)

    response = drf_exception_handler(exc, context)

    # Unhandled: let it propagate so Sentry sees the original traceback
    if response is None:
        sentry_sdk.capture_exception(exc)
        raise exc

    if response.status_code >= 500:
        sentry_sdk.capture_exception(exc)

    return response
