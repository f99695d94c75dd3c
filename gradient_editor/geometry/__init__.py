from .layout import GradientLayoutGeometry, Orientation, Size, Rect, SizeLike

__all__ = [
    "GradientLayoutGeometry",
    "Orientation",
    "Size",
    "Rect",
    "SizeLike",
]
