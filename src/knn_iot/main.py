# Main entry point
import argparse
import logging
import os
import sys
from typing import List, Optional

from .classifiers.knn_classifier import classify
from .config import DEFAULT_DATA_PATH, Settings
from .dataset import Dataset
from .evaluation.evaluator import EvaluationResult, evaluate
from .utils.data_loader import (
    DatasetLoadError,
    drop_unknown,
    load_sample_dataset,
    read_dataset,
    shuffle_dataset,
    split_dataset,
)
from .utils.logger import get_logger
from .utils.timing import timed

logger = logging.getLogger(__name__)


def load_data(settings: Settings) -> Dataset:
    """Load the configured data file.

    Only the default path falls back to the bundled Iris sample when missing;
    any other path must exist.
    """
    if settings.data_path == DEFAULT_DATA_PATH and not os.path.exists(settings.data_path):
        logger.info(f"{settings.data_path} not found, using bundled Iris sample")
        dataset = load_sample_dataset(settings.class_names)
    else:
        dataset = read_dataset(settings.data_path, settings.class_names)
    return drop_unknown(dataset)


def print_result(name: str, result: EvaluationResult) -> None:
    print(f"Correct classification in {name} set")
    print(f"\t{name}_len: {result.total}")
    print(f"\t correct_{name}_pred: {result.correct}")
    print(f"\t correct_{name}_pred_perc: {result.accuracy_pct:.2f}")


def parse_query(text: str) -> List[float]:
    try:
        return [float(v) for v in text.split(",")]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Query must be comma-separated numbers: {text!r}") from e


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="KNN K-Nearest-Neighbors classification")
    parser.add_argument("--config", default="config/hyperparameters.json")
    parser.add_argument("--data", help="Path to comma-separated dataset file")
    parser.add_argument("--k", type=int, help="Number of neighbors to consult")
    parser.add_argument("--train-fraction", type=float, help="Fraction of records used for training")
    parser.add_argument("--seed", type=int, help="Seed for shuffling the dataset")
    parser.add_argument("--log-level", help="Logging level")
    parser.add_argument("--query", type=parse_query, help="Classify one comma-separated feature vector")

    args = parser.parse_args(argv)

    # Load configuration
    settings = Settings.from_env(Settings.from_file(args.config))
    overrides = {
        "data_path": args.data,
        "k": args.k,
        "train_fraction": args.train_fraction,
        "seed": args.seed,
        "log_level": args.log_level,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(settings, key, value)

    get_logger("knn_iot", settings.log_level, settings.log_file)

    print("\nKNN  K-Nearest-Neighbors\n")

    try:
        dataset = load_data(settings)
    except DatasetLoadError as e:
        logger.error(f"Exiting with error while reading dataset: {e}")
        return 1

    if args.query is not None:
        try:
            label = classify(dataset, settings.k, args.query)
        except ValueError as e:
            logger.error(str(e))
            return 1
        print(f"Prediction: {dataset.class_name(label)}")
        return 0

    dataset = shuffle_dataset(dataset, settings.seed)
    train, test = split_dataset(dataset, settings.train_fraction)
    logger.info(f"Train: {len(train)}, Test: {len(test)}")

    try:
        with timed("evaluate train set"):
            train_result = evaluate(train, settings.k, train)
        print_result("train", train_result)

        with timed("evaluate test set"):
            test_result = evaluate(train, settings.k, test)
        print_result("test", test_result)
    except ValueError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
