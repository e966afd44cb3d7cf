"""Result models returned by the analysis functions."""

from .analysis import (
    AnalysisReport,
    ConcentrationLevel,
    ConcentrationResult,
    PriceMover,
    SeasonalIndex,
    SeasonalInterpretation,
    TrendDirection,
    TrendResult,
)

__all__ = [
    "AnalysisReport",
    "ConcentrationLevel",
    "ConcentrationResult",
    "PriceMover",
    "SeasonalIndex",
    "SeasonalInterpretation",
    "TrendDirection",
    "TrendResult",
]
