from .color_variant import ColorVariant

__all__ = ["ColorVariant"]
