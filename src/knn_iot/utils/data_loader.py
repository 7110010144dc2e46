"""Dataset loading, shuffling and train/test splitting."""

import logging
import os
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..dataset import Dataset, UNKNOWN_LABEL

logger = logging.getLogger(__name__)


class DatasetLoadError(OSError):
    """Raised when a dataset file is missing or cannot be parsed."""


def read_dataset(file_path: str, class_names: Sequence[str], dimension: Optional[int] = None) -> Dataset:
    """Load a comma-separated dataset file.

    Expected format: one record per line, no header, numeric features
    followed by a trailing class name, e.g.
    ``5.1,3.5,1.4,0.2,Iris-setosa``. Class names not found in
    ``class_names`` are mapped to UNKNOWN_LABEL.
    """
    if not os.path.exists(file_path):
        raise DatasetLoadError(f"Unable to open file {file_path}")
    try:
        frame = pd.read_csv(file_path, header=None, skip_blank_lines=True, skipinitialspace=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DatasetLoadError(f"Failed to parse {file_path}: {e}") from e

    if frame.shape[1] < 2:
        raise DatasetLoadError(f"{file_path} must have at least one feature column and a class column")
    n_features = frame.shape[1] - 1
    if dimension is not None and n_features != dimension:
        raise DatasetLoadError(f"Expected {dimension} features per row in {file_path}, found {n_features}")

    try:
        features = frame.iloc[:, :n_features].to_numpy(dtype=float)
    except ValueError as e:
        raise DatasetLoadError(f"Non-numeric feature value in {file_path}: {e}") from e
    if np.isnan(features).any():
        raise DatasetLoadError(f"Missing feature values in {file_path}")

    lookup = {name: index for index, name in enumerate(class_names)}
    names = frame.iloc[:, n_features].astype(str).str.strip()
    labels = names.map(lambda name: lookup.get(name, UNKNOWN_LABEL)).to_numpy(dtype=int)

    logger.info(f"Loaded {len(labels)} records with {n_features} features from {file_path}")
    return Dataset(features=features, labels=labels, class_names=tuple(class_names), strict=False)


def drop_unknown(dataset: Dataset) -> Dataset:
    """Keep only records whose label is a valid class index."""
    labels = dataset.labels
    keep = np.flatnonzero((labels >= 0) & (labels < dataset.num_classes))
    dropped = len(dataset) - len(keep)
    if dropped:
        logger.warning(f"Dropping {dropped} records with unrecognized class names")
    clean = dataset.subset(keep)
    return Dataset(features=clean.features, labels=clean.labels, class_names=clean.class_names)


def load_sample_dataset(class_names: Optional[Sequence[str]] = None) -> Dataset:
    """Iris dataset bundled with scikit-learn (150 records, 4 features, 3 classes)."""
    from sklearn.datasets import load_iris

    data = load_iris()
    if class_names is None:
        class_names = ("Iris-setosa", "Iris-versicolor", "Iris-virginica")
    if len(class_names) != len(data.target_names):
        raise DatasetLoadError(
            f"Sample dataset has {len(data.target_names)} classes, got {len(class_names)} class names"
        )
    return Dataset(features=data.data, labels=data.target, class_names=tuple(class_names))


def shuffle_dataset(dataset: Dataset, seed: int) -> Dataset:
    """Randomly permute the records; the same seed yields the same order."""
    rng = np.random.default_rng(seed)
    return dataset.subset(rng.permutation(len(dataset)))


def split_dataset(dataset: Dataset, train_fraction: float) -> Tuple[Dataset, Dataset]:
    """Split into (train, test) at ``int(len(dataset) * train_fraction)``.

    Records keep their relative order and each lands in exactly one part.
    """
    if not 0.0 <= train_fraction <= 1.0:
        raise ValueError(f"train_fraction must be in [0, 1], got {train_fraction}")
    boundary = int(len(dataset) * train_fraction)
    indices = np.arange(len(dataset))
    return dataset.subset(indices[:boundary]), dataset.subset(indices[boundary:])
