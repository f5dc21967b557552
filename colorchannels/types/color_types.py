from typing import Literal

Scalar = int | float
ColorSpace = Literal["rgb", "hsv"]
HUE_SPACES = {"hsv"}
