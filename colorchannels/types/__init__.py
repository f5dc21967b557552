from .angle import Deg
from .color_types import ColorSpace, Scalar, HUE_SPACES
from .format_type import FormatType, HUE_360, HUE_SECTOR

__all__ = [
    'Deg',
    'ColorSpace',
    'Scalar',
    'HUE_SPACES',
    'FormatType',
    'HUE_360',
    'HUE_SECTOR',
]
