"""Dataset collaborators, logging, metrics and timing helpers."""

from .data_loader import (
    DatasetLoadError,
    drop_unknown,
    load_sample_dataset,
    read_dataset,
    shuffle_dataset,
    split_dataset,
)
from .logger import get_logger
from .metrics import calculate_accuracy, format_vector
from .timing import timed

__all__ = [
    'DatasetLoadError',
    'drop_unknown',
    'load_sample_dataset',
    'read_dataset',
    'shuffle_dataset',
    'split_dataset',
    'get_logger',
    'calculate_accuracy',
    'format_vector',
    'timed',
]
