"""Raqim schemas."""

from raqim.schemas.evaluation import (
    EvaluationResult,
    QualityReport,
    ScoredAspect,
)

__all__ = [
    "EvaluationResult",
    "QualityReport",
    "ScoredAspect",
]
