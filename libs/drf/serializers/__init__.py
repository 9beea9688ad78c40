from .colored_value import ColoredValueSerializer

__all__ = ["ColoredValueSerializer"]
