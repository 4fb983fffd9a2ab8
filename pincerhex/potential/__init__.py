"""Potential-field move evaluation."""

from .evaluator import EDGES, Edge, EvaluatorConfig, PotentialEvaluator

__all__ = ["EDGES", "Edge", "EvaluatorConfig", "PotentialEvaluator"]
