import warnings
import numpy as np
from numpy import ndarray as NDArray


def np_clip_unit(values: NDArray, name: str) -> NDArray:
    """Clip array input into [0, 1], warning when anything had to be clipped."""
    values = np.asarray(values, dtype=float)
    if np.any((values < 0.0) | (values > 1.0)):
        warnings.warn(
            f"{name} values outside [0, 1] were clipped",
            UserWarning,
            stacklevel=3,
        )
        values = np.clip(values, 0.0, 1.0)
    return values
