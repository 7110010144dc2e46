# Distance metric between feature vectors
import numpy as np


def euclidean_distance(point_a, point_b) -> float:
    """Square root of the summed per-dimension squared differences."""
    a = np.asarray(point_a, dtype=float)
    b = np.asarray(point_b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Dimension mismatch: {a.shape} vs {b.shape}")
    return float(np.sqrt(np.sum((a - b) ** 2)))


def distances_to(features: np.ndarray, query: np.ndarray) -> np.ndarray:
    """Euclidean distance from every row of ``features`` to ``query``."""
    features = np.asarray(features, dtype=float)
    query = np.asarray(query, dtype=float)
    if features.ndim != 2 or query.ndim != 1 or features.shape[1] != query.shape[0]:
        raise ValueError(
            f"Dimension mismatch: training vectors {features.shape}, query {query.shape}"
        )
    return np.sqrt(np.sum((features - query) ** 2, axis=1))
