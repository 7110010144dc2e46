import numpy as np
import pytest

from knn_iot.dataset import Dataset

KNN_ENV_VARS = ("KNN_K", "KNN_TRAIN_FRACTION", "KNN_SEED", "KNN_DATA_PATH", "KNN_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_knn_env(monkeypatch):
    # Make sure a developer's environment does not leak into Settings
    for name in KNN_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def two_clusters():
    return Dataset(
        features=[[0, 0], [0, 1], [10, 10], [10, 11]],
        labels=[0, 0, 1, 1],
        class_names=("A", "B"),
    )


@pytest.fixture
def three_clusters():
    """60 points around three far-apart centers, 20 per class."""
    rng = np.random.default_rng(0)
    centers = np.array([[0.0, 0.0], [10.0, 10.0], [-10.0, 10.0]])
    features = np.vstack([rng.normal(center, 0.5, size=(20, 2)) for center in centers])
    labels = np.repeat([0, 1, 2], 20)
    return Dataset(features=features, labels=labels, class_names=("red", "green", "blue"))
