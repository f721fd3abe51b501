"""
Jump reachability analysis over the walkable surface catalog.
"""

from .jump_model import JumpEnvelope
from .reachability_analyzer import ReachabilityAnalyzer, is_reachable_from, reachable_indices
from .jump_tester import JumpTester

__all__ = [
    "JumpEnvelope",
    "ReachabilityAnalyzer",
    "is_reachable_from",
    "reachable_indices",
    "JumpTester",
]
