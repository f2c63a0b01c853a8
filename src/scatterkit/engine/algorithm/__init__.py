from .config import ScatterSearchConfig, ScatterSearchConfigData
from .scatter import ScatterSearch

__all__ = ["ScatterSearch", "ScatterSearchConfig", "ScatterSearchConfigData"]
