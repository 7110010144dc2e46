# Utility functions
from typing import Sequence


def calculate_accuracy(correct: int, total: int) -> float:
    """Percentage of correct predictions; 0.0 when nothing was evaluated."""
    if total <= 0:
        return 0.0
    return 100.0 * correct / total


def format_vector(values: Sequence[float]) -> str:
    """Comma-joined feature values, as they appear in the data file."""
    return ",".join(f"{float(v):g}" for v in values)
