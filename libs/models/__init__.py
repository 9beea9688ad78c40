from .base_model_mixin import AutoCodeMixin, BaseModel
from .colored_value_mixin import ColoredValueMixin

__all__ = ["BaseModel", "AutoCodeMixin", "ColoredValueMixin"]
