from .code_generation import (
    create_auto_code_signal_handler,
    generate_model_code,
    register_auto_code_signal,
)
from .constants import ColorVariant
from .drf.base_viewset import BaseModelViewSet, BaseReadOnlyModelViewSet
from .drf.pagination import PageNumberWithSizePagination
from .drf.serializers import ColoredValueSerializer
from .models import AutoCodeMixin, BaseModel, ColoredValueMixin

__all__ = [
    "AutoCodeMixin",
    "BaseModel",
    "ColoredValueMixin",
    "ColorVariant",
    "ColoredValueSerializer",
    "BaseModelViewSet",
    "BaseReadOnlyModelViewSet",
    "PageNumberWithSizePagination",
    "create_auto_code_signal_handler",
    "generate_model_code",
    "register_auto_code_signal",
]
