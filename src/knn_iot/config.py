from typing import Optional, Tuple
from dataclasses import dataclass, field, replace
import json
import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

IRIS_CLASS_NAMES = ("Iris-setosa", "Iris-versicolor", "Iris-virginica")
DEFAULT_DATA_PATH = "data/iris.data"


@dataclass
class Settings:
    """Configuration settings loaded from hyperparameters.json"""
    k: int = 5
    train_fraction: float = 0.8
    seed: int = 3
    class_names: Tuple[str, ...] = field(default=IRIS_CLASS_NAMES)
    data_path: str = DEFAULT_DATA_PATH
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_file(cls, config_path: str = "config/hyperparameters.json") -> "Settings":
        """Load settings from configuration file"""
        if not os.path.exists(config_path):
            return cls()
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not load config from {config_path}: {e}")
            return cls()

        defaults = cls()
        return cls(
            k=int(config.get("knn", {}).get("k", defaults.k)),
            train_fraction=float(config.get("data", {}).get("train_fraction", defaults.train_fraction)),
            seed=int(config.get("data", {}).get("seed", defaults.seed)),
            class_names=tuple(config.get("data", {}).get("class_names", defaults.class_names)),
            data_path=config.get("data", {}).get("path", defaults.data_path),
            log_level=config.get("logging", {}).get("level", defaults.log_level),
            log_file=config.get("logging", {}).get("file", defaults.log_file),
        )

    def with_env(self, dotenv_path: Optional[str] = None) -> "Settings":
        """Apply KNN_* environment overrides (a .env file is read first)."""
        load_dotenv(dotenv_path)
        overrides = {}
        if os.getenv("KNN_K"):
            overrides["k"] = int(os.environ["KNN_K"])
        if os.getenv("KNN_TRAIN_FRACTION"):
            overrides["train_fraction"] = float(os.environ["KNN_TRAIN_FRACTION"])
        if os.getenv("KNN_SEED"):
            overrides["seed"] = int(os.environ["KNN_SEED"])
        if os.getenv("KNN_DATA_PATH"):
            overrides["data_path"] = os.environ["KNN_DATA_PATH"]
        if os.getenv("KNN_LOG_LEVEL"):
            overrides["log_level"] = os.environ["KNN_LOG_LEVEL"]
        return replace(self, **overrides)

    @classmethod
    def from_env(cls, base: Optional["Settings"] = None, dotenv_path: Optional[str] = None) -> "Settings":
        return (base or cls()).with_env(dotenv_path)
