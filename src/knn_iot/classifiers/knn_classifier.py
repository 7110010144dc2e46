"""Brute-force K-Nearest-Neighbors classifier.

Every query is ranked against the whole training set and the label is
resolved with a shrinking-K majority vote: when the K nearest neighbors
produce a tie, the neighborhood shrinks by one and the vote is retried
until a single class wins outright.
"""

from typing import Optional, Tuple
import numpy as np

from ..dataset import Dataset, UNKNOWN_LABEL
from .distance import distances_to


def validate_k(k: int, n_train: int) -> None:
    """Raise ValueError unless 1 <= k <= n_train and the training set is non-empty."""
    if n_train == 0:
        raise ValueError("Training set must not be empty")
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise ValueError(f"k must be an integer, got {k!r}")
    if k < 1 or k > n_train:
        raise ValueError(f"k must be in [1, {n_train}], got {k}")


def rank_neighbors(features: np.ndarray, query) -> Tuple[np.ndarray, np.ndarray]:
    """Return (indices, distances) of all training rows, nearest first.

    Equal distances keep their original training order.
    """
    distances = distances_to(features, query)
    order = np.argsort(distances, kind="stable")
    return order, distances[order]


def class_histogram(labels: np.ndarray, num_classes: int) -> np.ndarray:
    """Vote count per class; labels outside [0, num_classes) cast no vote."""
    labels = np.asarray(labels, dtype=int)
    valid = labels[(labels >= 0) & (labels < num_classes)]
    return np.bincount(valid, minlength=num_classes)


def majority_vote(ranked_labels: np.ndarray, k: int, num_classes: int) -> int:
    """Resolve the label of the ``k`` nearest neighbors.

    ``ranked_labels`` holds neighbor labels ordered nearest first. On a tie
    for the top count the neighborhood shrinks by one and the vote is taken
    again. Returns UNKNOWN_LABEL if the neighborhood empties without a unique
    winner; a class with no votes never wins.
    """
    effective_k = k
    while effective_k > 0:
        histogram = class_histogram(ranked_labels[:effective_k], num_classes)
        winners = np.flatnonzero(histogram == histogram.max())
        if histogram.max() > 0 and len(winners) == 1:
            return int(winners[0])
        effective_k -= 1
    return UNKNOWN_LABEL


def classify(train: Dataset, k: int, query) -> int:
    """Classify ``query`` against ``train`` using its ``k`` nearest neighbors."""
    validate_k(k, len(train))
    query = np.asarray(query, dtype=float)
    if query.ndim != 1 or query.shape[0] != train.dimension:
        raise ValueError(
            f"Query dimension {query.shape} does not match training dimension {train.dimension}"
        )
    order, _ = rank_neighbors(train.features, query)
    return majority_vote(train.labels[order], k, train.num_classes)


class KNNClassifier:
    def __init__(self, k: int = 5):
        self.k = k
        self.train: Optional[Dataset] = None
        self.is_fitted = False

    def fit(self, train: Dataset) -> None:
        """Store the training set; KNN does no work until predict."""
        validate_k(self.k, len(train))
        self.train = train
        self.is_fitted = True

    def predict_one(self, query) -> int:
        if not self.is_fitted:
            raise ValueError("Must fit before predict")
        return classify(self.train, self.k, query)

    def predict(self, queries) -> np.ndarray:
        """Predict a label for every row of ``queries``"""
        if not self.is_fitted:
            raise ValueError("Must fit before predict")
        queries = np.asarray(queries, dtype=float)
        if queries.ndim == 1:
            queries = queries.reshape(1, -1)
        return np.array([classify(self.train, self.k, q) for q in queries], dtype=int)

    def get_neighbors(self, query, k: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
        """Get distances and training indices of the k nearest neighbors"""
        if not self.is_fitted:
            raise ValueError("Must fit before get_neighbors")
        if k is None:
            k = self.k
        validate_k(k, len(self.train))
        order, distances = rank_neighbors(self.train.features, query)
        return distances[:k], order[:k]
