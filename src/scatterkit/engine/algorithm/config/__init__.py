"""Algorithm configuration module.

Examples:
    from scatterkit.engine.algorithm.config import ScatterSearchConfig

    # Fluent builder
    cfg = ScatterSearchConfig().ref_set_size(10).max_iterations(50).result_mode("best_ever").fixed()

    # Quick defaults
    cfg = ScatterSearchConfig.default(ref_set_size=10)
"""

from .scatter import ScatterSearchConfig, ScatterSearchConfigData

__all__ = [
    "ScatterSearchConfig",
    "ScatterSearchConfigData",
]
