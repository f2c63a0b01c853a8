"""
Scatter search algorithm module.

This package provides the scatter search implementation with modular components:
- `scatter.py`: main ScatterSearch class (initial and main phases)
- `diversification.py`: stride-based trial generation
- `reference_set.py`: quality/diversity reference set update, duplicate removal
- `subsets.py`: subset index and subset generation
- `combination.py`: inverse-cost weighted voting and delegated assembly
- `state.py`: ScatterSearchState + result building

References:
    F. Glover, M. Laguna, and R. Marti, "Fundamentals of Scatter Search and
    Path Relinking," Control and Cybernetics 29(3), 2000.
"""

from .scatter import ScatterSearch
from .combination import SolutionCombiner, flatten_members, member_weights, round_half_up, variable_scores
from .diversification import DiversificationGenerator, stride_permutation
from .reference_set import ReferenceSetUpdater, Selection, remove_duplicates
from .state import ScatterSearchState, SearchPhase, build_scatter_result
from .subsets import Subset, SubsetGenerator, SubsetIndex, Subsets, extend_with_best

__all__ = [
    "ScatterSearch",
    # Diversification
    "DiversificationGenerator",
    "stride_permutation",
    # Reference set
    "ReferenceSetUpdater",
    "Selection",
    "remove_duplicates",
    # Subsets
    "Subset",
    "SubsetGenerator",
    "SubsetIndex",
    "Subsets",
    "extend_with_best",
    # Combination
    "SolutionCombiner",
    "flatten_members",
    "member_weights",
    "round_half_up",
    "variable_scores",
    # State
    "ScatterSearchState",
    "SearchPhase",
    "build_scatter_result",
]
