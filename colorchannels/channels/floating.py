from typing import ClassVar
import numpy as np
from .base import FloatChannel


class F32(FloatChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.float32


class F64(FloatChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.float64
