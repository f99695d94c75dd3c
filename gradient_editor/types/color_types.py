from __future__ import annotations
from typing import Literal, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ColorTuple = Tuple[float, float, float, float]
ColorLike = Union[Sequence[Scalar], ndarray]
ColorComponent = Literal["red", "green", "blue", "alpha"]
COLOR_COMPONENTS: Tuple[ColorComponent, ...] = ("red", "green", "blue", "alpha")
StopEncoding = Literal["single", "dual"]

def element_to_array(element: ColorLike) -> np.ndarray:
    """
    Convert a color-like value to a float64 numpy array.

    Args:
        element: Sequence of 3 or 4 components, or an ndarray

    Returns:
        numpy array representation (not validated)
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.asarray(element, dtype=np.float64)
