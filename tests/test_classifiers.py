# Test files
import numpy as np
import pytest

from knn_iot.classifiers.distance import distances_to, euclidean_distance
from knn_iot.classifiers.knn_classifier import (
    KNNClassifier,
    class_histogram,
    classify,
    majority_vote,
    rank_neighbors,
)
from knn_iot.dataset import Dataset, UNKNOWN_CLASS_NAME, UNKNOWN_LABEL


def test_distance_known_value():
    assert euclidean_distance([0, 0], [3, 4]) == pytest.approx(5.0)


def test_distance_symmetric_and_zero_on_self():
    rng = np.random.default_rng(1)
    for _ in range(20):
        a, b = rng.normal(size=4), rng.normal(size=4)
        assert euclidean_distance(a, b) == euclidean_distance(b, a)
        assert euclidean_distance(a, a) == 0.0
        assert euclidean_distance(a, b) > 0.0


def test_distance_triangle_inequality():
    rng = np.random.default_rng(2)
    for _ in range(50):
        a, b, c = rng.uniform(-5, 5, size=(3, 4))
        assert euclidean_distance(a, c) <= euclidean_distance(a, b) + euclidean_distance(b, c) + 1e-9


def test_distance_dimension_mismatch():
    with pytest.raises(ValueError):
        euclidean_distance([1, 2, 3], [1, 2])
    with pytest.raises(ValueError):
        distances_to(np.zeros((3, 2)), np.zeros(3))


def test_distances_to_matches_pairwise():
    features = np.array([[0.0, 0.0], [1.0, 1.0], [3.0, 4.0]])
    query = np.array([0.0, 0.0])
    expected = [euclidean_distance(row, query) for row in features]
    assert np.allclose(distances_to(features, query), expected)


def test_rank_neighbors_is_stable_on_equal_distances():
    features = np.array([[1.0, 0.0], [5.0, 5.0], [0.0, 1.0], [-1.0, 0.0], [0.0, -1.0]])
    order, distances = rank_neighbors(features, [0.0, 0.0])
    assert order.tolist() == [0, 2, 3, 4, 1]
    assert np.all(np.diff(distances) >= 0)


def test_class_histogram_ignores_invalid_labels():
    hist = class_histogram(np.array([0, 2, 2, -1, 5]), 3)
    assert hist.tolist() == [1, 0, 2]


def test_majority_vote_unique_winner():
    assert majority_vote(np.array([1, 1, 0, 2, 1]), 5, 3) == 1


def test_majority_vote_shrinks_to_single_nearest():
    # k=3: {0:1, 1:1, 2:1} tie; k=2: {0:1, 2:1} tie; k=1: nearest wins
    assert majority_vote(np.array([2, 0, 1]), 3, 3) == 2


def test_majority_vote_tie_is_not_broken_by_lowest_class():
    # k=4: {0:2, 1:2} tie; k=3: {0:1, 1:2} -> 1 even though 0 is the lower index
    assert majority_vote(np.array([1, 0, 1, 0]), 4, 2) == 1


def test_majority_vote_single_class_without_votes_is_unknown():
    assert majority_vote(np.array([-1, -1]), 2, 1) == UNKNOWN_LABEL
    assert majority_vote(np.array([-1, 0]), 2, 1) == 0


def test_classify_unlabeled_neighbors_single_class():
    train = Dataset(
        features=[[0, 0], [1, 1]],
        labels=[UNKNOWN_LABEL, UNKNOWN_LABEL],
        class_names=("A",),
        strict=False,
    )
    assert classify(train, 2, [0, 0]) == UNKNOWN_LABEL


def test_majority_vote_exhausted_returns_unknown():
    assert majority_vote(np.array([-1, -1]), 2, 3) == UNKNOWN_LABEL


def test_classify_equidistant_tie_uses_three_nearest():
    train = Dataset(
        features=[[1, 0], [0, 1], [-1, 0], [0, -1]],
        labels=[0, 0, 1, 1],
        class_names=("A", "B"),
    )
    # All four at distance 1: {0:2, 1:2} ties, then the first three by index vote 0
    assert classify(train, 4, [0, 0]) == 0


def test_classify_end_to_end_scenario(two_clusters):
    assert classify(two_clusters, 1, [0.1, 0.1]) == 0
    assert classify(two_clusters, 1, [9.0, 10.5]) == 1


def test_classify_single_class_full_k():
    train = Dataset(features=[[0, 0], [5, 5], [9, 1]], labels=[1, 1, 1], class_names=("x", "y"))
    for query in ([0, 0], [100, -100], [4, 4]):
        assert classify(train, 3, query) == 1


def test_classify_is_deterministic(three_clusters):
    query = [1.0, 4.0]
    assert classify(three_clusters, 7, query) == classify(three_clusters, 7, query)


@pytest.mark.parametrize("k", [0, -1, 5, True, 2.0])
def test_classify_rejects_bad_k(two_clusters, k):
    with pytest.raises(ValueError):
        classify(two_clusters, k, [0, 0])


def test_classify_rejects_empty_train():
    empty = Dataset(features=np.empty((0, 2)), labels=[], class_names=("A",))
    with pytest.raises(ValueError):
        classify(empty, 1, [0, 0])


def test_classify_rejects_query_dimension_mismatch(two_clusters):
    with pytest.raises(ValueError):
        classify(two_clusters, 1, [0, 0, 0])


def test_dataset_rejects_out_of_range_labels():
    with pytest.raises(ValueError):
        Dataset(features=[[0], [1]], labels=[0, UNKNOWN_LABEL], class_names=("A",))
    loose = Dataset(features=[[0], [1]], labels=[0, UNKNOWN_LABEL], class_names=("A",), strict=False)
    assert loose.class_name(loose.labels[1]) == UNKNOWN_CLASS_NAME


def test_dataset_rejects_misaligned_tables():
    with pytest.raises(ValueError):
        Dataset(features=[[0, 0], [1, 1]], labels=[0], class_names=("A",))


def test_dataset_is_read_only(two_clusters):
    with pytest.raises(ValueError):
        two_clusters.features[0, 0] = 42.0
    with pytest.raises(ValueError):
        two_clusters.labels[0] = 1


def test_knn_classifier_wrapper(three_clusters):
    clf = KNNClassifier(k=3)
    with pytest.raises(ValueError):
        clf.predict([[0, 0]])
    clf.fit(three_clusters)
    assert clf.predict([[0.2, -0.1], [9.5, 10.2], [-10.1, 9.7]]).tolist() == [0, 1, 2]
    assert clf.predict_one([10, 10]) == 1

    distances, indices = clf.get_neighbors([0.0, 0.0])
    assert len(indices) == 3
    assert all(three_clusters.labels[i] == 0 for i in indices)
    assert np.all(np.diff(distances) >= 0)


def test_knn_classifier_fit_rejects_k_larger_than_train(two_clusters):
    with pytest.raises(ValueError):
        KNNClassifier(k=10).fit(two_clusters)
