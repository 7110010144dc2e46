"""Distance metric and nearest-neighbor classifier."""

from .distance import euclidean_distance, distances_to
from .knn_classifier import (
    KNNClassifier,
    class_histogram,
    classify,
    majority_vote,
    rank_neighbors,
    validate_k,
)

__all__ = [
    'euclidean_distance',
    'distances_to',
    'KNNClassifier',
    'class_histogram',
    'classify',
    'majority_vote',
    'rank_neighbors',
    'validate_k',
]
