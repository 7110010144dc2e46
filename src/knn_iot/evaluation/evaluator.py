"""Run the classifier over a batch of records and tally accuracy."""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np
from sklearn.metrics import confusion_matrix as sk_confusion_matrix

from ..classifiers.knn_classifier import classify, validate_k
from ..dataset import Dataset
from ..utils.metrics import calculate_accuracy, format_vector

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Outcome of classifying every record of a subject dataset."""

    total: int
    correct: int
    accuracy_pct: float
    # (record index, predicted label) for every miss
    misclassified: List[Tuple[int, int]] = field(default_factory=list)
    predictions: np.ndarray = field(default_factory=lambda: np.array([], dtype=int), repr=False)

    def as_tuple(self) -> Tuple[int, int, float]:
        return self.total, self.correct, self.accuracy_pct


def evaluate(train: Dataset, k: int, subject: Dataset) -> EvaluationResult:
    """Classify each record of ``subject`` against ``train`` and count matches.

    Misclassified records are logged as the feature vector followed by the
    predicted class name.
    """
    validate_k(k, len(train))
    predictions = np.empty(len(subject), dtype=int)
    misclassified = []
    correct = 0
    for i in range(len(subject)):
        point = subject.features[i]
        predicted = classify(train, k, point)
        predictions[i] = predicted
        if predicted == subject.labels[i]:
            correct += 1
        else:
            misclassified.append((i, predicted))
            logger.info(f"{format_vector(point)},{train.class_name(predicted)}")

    total = len(subject)
    return EvaluationResult(
        total=total,
        correct=correct,
        accuracy_pct=calculate_accuracy(correct, total),
        misclassified=misclassified,
        predictions=predictions,
    )


def confusion_matrix(subject: Dataset, predictions: Sequence[int]) -> np.ndarray:
    """Rows are true classes, columns predicted classes, both in [0, C).

    Predictions equal to UNKNOWN_LABEL are not counted in any column.
    """
    return sk_confusion_matrix(
        subject.labels, np.asarray(predictions, dtype=int), labels=list(range(subject.num_classes))
    )
