"""Timing harness for measuring classifier runs."""

import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)


@contextmanager
def timed(label: str, results: Optional[Dict[str, float]] = None) -> Iterator[None]:
    """Log how long the wrapped block took, in microseconds.

    If ``results`` is given the duration is also stored under ``label``.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_us = (time.perf_counter() - start) * 1e6
        if results is not None:
            results[label] = elapsed_us
        logger.info(f"time duration - {label} : {elapsed_us:.0f} micro seconds")
