from .base import BaseProbe
from .tcp import TcpProbe

__all__ = ["BaseProbe", "TcpProbe"]
