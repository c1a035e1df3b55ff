"""Runtime: isolated evaluation of generator modules."""

from .sandbox import ExportEvaluator, DukpyEvaluator, default_evaluator

__all__ = ['ExportEvaluator', 'DukpyEvaluator', 'default_evaluator']
