"""Brute-force K-Nearest-Neighbors classification for small in-memory datasets."""

from .classifiers import KNNClassifier, classify, euclidean_distance
from .dataset import Dataset, UNKNOWN_CLASS_NAME, UNKNOWN_LABEL
from .evaluation import EvaluationResult, evaluate

__version__ = "0.1.0"

__all__ = [
    'KNNClassifier',
    'classify',
    'euclidean_distance',
    'Dataset',
    'UNKNOWN_CLASS_NAME',
    'UNKNOWN_LABEL',
    'EvaluationResult',
    'evaluate',
]
