from typing import ClassVar
import numpy as np
from .base import IntChannel


class U8(IntChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.uint8


class U16(IntChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.uint16


class U32(IntChannel):
    __slots__ = ()
    dtype: ClassVar[type] = np.uint32
