"""Evaluation module for batch accuracy."""

from .evaluator import EvaluationResult, confusion_matrix, evaluate

__all__ = ['EvaluationResult', 'confusion_matrix', 'evaluate']
