"""Herfindahl-Hirschman market concentration"""

import math
from typing import Sequence

from ..data.models import MarketObservation
from ..models.analysis import ConcentrationLevel, ConcentrationResult

# US DOJ merger guideline bands
HIGHLY_CONCENTRATED_HHI = 2500
MODERATELY_CONCENTRATED_HHI = 1500


def classify_hhi(hhi: float) -> ConcentrationLevel:
    if hhi > HIGHLY_CONCENTRATED_HHI:
        return ConcentrationLevel.HIGHLY_CONCENTRATED
    if hhi > MODERATELY_CONCENTRATED_HHI:
        return ConcentrationLevel.MODERATELY_CONCENTRATED
    return ConcentrationLevel.COMPETITIVE


def market_concentration(observations: Sequence[MarketObservation]) -> ConcentrationResult:
    """
    Calculate the Herfindahl-Hirschman index of traded volume

    HHI = sum of squared market shares in percent, from 0 (atomized) to
    10000 (single market).

    Args:
        observations: Per-market volume figures

    Returns:
        ConcentrationResult with HHI rounded to the nearest integer;
        (0, competitive) when total volume is zero
    """
    total_volume = sum(obs.volume for obs in observations)

    if total_volume == 0:
        return ConcentrationResult(hhi=0, interpretation=ConcentrationLevel.COMPETITIVE)

    hhi = sum((obs.volume / total_volume * 100) ** 2 for obs in observations)

    return ConcentrationResult(
        hhi=math.floor(hhi + 0.5),
        interpretation=classify_hhi(hhi),
    )
