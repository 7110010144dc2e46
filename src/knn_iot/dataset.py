"""Index-aligned feature/label tables used by the classifier."""

from dataclasses import dataclass, field
from typing import Sequence, Tuple, Union
import numpy as np

UNKNOWN_LABEL = -1
UNKNOWN_CLASS_NAME = "UNKNOWN"


@dataclass(frozen=True, eq=False)
class Dataset:
    """Feature table, label table and the class names the labels index into.

    features[i] and labels[i] describe the same record. When ``strict`` is set
    (the default) every label must be a valid class index; loaders build
    non-strict datasets so unrecognized rows can be inspected and dropped.
    """

    features: np.ndarray
    labels: np.ndarray
    class_names: Tuple[str, ...]
    strict: bool = field(default=True, compare=False)

    def __post_init__(self):
        features = np.array(self.features, dtype=float)
        labels = np.array(self.labels, dtype=int)
        if features.ndim == 1 and features.size == 0:
            features = features.reshape(0, 0)
        if features.ndim != 2:
            raise ValueError(f"features must be a 2D array, got {features.ndim}D array")
        if labels.ndim != 1:
            raise ValueError(f"labels must be a 1D array, got {labels.ndim}D array")
        if features.shape[0] != labels.shape[0]:
            raise ValueError(
                f"features and labels must have the same length. "
                f"Got features: {features.shape[0]}, labels: {labels.shape[0]}"
            )
        class_names = tuple(self.class_names)
        if not class_names:
            raise ValueError("class_names must not be empty")
        if self.strict and labels.size:
            bad = labels[(labels < 0) | (labels >= len(class_names))]
            if bad.size:
                raise ValueError(
                    f"labels must be in [0, {len(class_names)}), got {sorted(set(bad.tolist()))}"
                )

        features.setflags(write=False)
        labels.setflags(write=False)
        object.__setattr__(self, "features", features)
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "class_names", class_names)

    def __len__(self) -> int:
        return int(self.labels.shape[0])

    @property
    def num_classes(self) -> int:
        return len(self.class_names)

    @property
    def dimension(self) -> int:
        return int(self.features.shape[1])

    def subset(self, indices: Union[Sequence[int], np.ndarray]) -> "Dataset":
        """Return a new dataset holding the given rows in the given order."""
        idx = np.asarray(indices, dtype=int)
        return Dataset(
            features=self.features[idx].reshape(len(idx), self.dimension),
            labels=self.labels[idx],
            class_names=self.class_names,
            strict=self.strict,
        )

    def class_name(self, label: int) -> str:
        if 0 <= label < self.num_classes:
            return self.class_names[label]
        return UNKNOWN_CLASS_NAME
