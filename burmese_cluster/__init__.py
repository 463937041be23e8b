from .errors import UnexpectedCharacterError
from .grapheme_cluster import GraphemeCluster
from .normalization import BurmeseNormalizer
from .rule_engine import Rule, Standardizer
from .slots import PLACEHOLDER, PRIVATE_USE_OFFSET, STACKING_IN_PROGRESS, Slots

__all__ = [
    "BurmeseNormalizer",
    "GraphemeCluster",
    "PLACEHOLDER",
    "PRIVATE_USE_OFFSET",
    "Rule",
    "STACKING_IN_PROGRESS",
    "Slots",
    "Standardizer",
    "UnexpectedCharacterError",
]
