# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


HUE_360 = 360
HUE_SECTOR = 60
