from .base import SensorPort
from .lego_port import LegoPort
from .sysfs import SysfsSensorPort

__all__ = ["SensorPort", "LegoPort", "SysfsSensorPort"]
