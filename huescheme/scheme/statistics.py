# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Per-family hue statistics.

For each hue group we estimate a representative hue, chroma and lightness.
Estimation runs an ordered chain of strategies; the first whose
precondition holds produces the estimate:

1. neutral_family: the group is gray. Hue and chroma are fixed, lightness
   is averaged over every parseable member.
2. no_chromatic_members: nothing in the group is saturated enough to carry
   a hue. Falls back to the family's reference hue.
3. chromatic_mean: circular-mean hue, mean saturation and mean lightness
   over the chromatic members.

In multi-zone mode, groups estimated by chromatic_mean are additionally
split by lightness into highlights, midtones and shadows, each with its own
circular-mean hue.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from huescheme.schema import (
    GroupAnalysis,
    HueFamily,
    MultiZoneHueAnalysis,
    SingleHueAnalysis,
)
from huescheme.scheme.classify import is_chromatic
from huescheme.scheme.colorspace import InvalidColorError, hex_to_hsl
from huescheme.scheme.hues import circular_mean, interpolate_hue
from huescheme.scheme.reference import REFERENCE_FAMILIES

logger = logging.getLogger(__name__)


# Fixed chroma reported for the gray family
NEUTRAL_CHROMA = 5.0

# Estimates used when a chromatic family has no chromatic members
FALLBACK_CHROMA = 50.0
FALLBACK_LIGHTNESS = 50.0


@dataclass(frozen=True)
class MultiZoneConfig:
    """
    Configuration for multi-zone (highlight / midtone / shadow) analysis.

    Chromatic members are split by HSL lightness (percent):
    - highlight: L >= highlight_threshold
    - midtone:   shadow_threshold <= L < highlight_threshold
    - shadow:    L < shadow_threshold
    """

    enabled: bool = True
    highlight_threshold: float = 66.0
    shadow_threshold: float = 33.0

    def __post_init__(self) -> None:
        """Validate thresholds."""
        if not 0.0 <= self.highlight_threshold <= 100.0:
            raise ValueError(
                f"highlight_threshold must be 0-100, got {self.highlight_threshold}"
            )
        if not 0.0 <= self.shadow_threshold <= 100.0:
            raise ValueError(
                f"shadow_threshold must be 0-100, got {self.shadow_threshold}"
            )
        if self.shadow_threshold > self.highlight_threshold:
            raise ValueError(
                f"shadow_threshold ({self.shadow_threshold}) must not exceed "
                f"highlight_threshold ({self.highlight_threshold})"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "enabled": self.enabled,
            "highlight_threshold": self.highlight_threshold,
            "shadow_threshold": self.shadow_threshold,
        }


# =============================================================================
# Group Members
# =============================================================================


@dataclass(frozen=True)
class GroupMembers:
    """
    Parsed members of one hue group.

    Attributes:
        family: Hue family of the group
        colors: All member hex values, input order
        parsed: Parseable member hex values
        hsl: (N, 3) HSL array aligned with parsed
    """
    family: HueFamily
    colors: tuple[str, ...]
    parsed: tuple[str, ...]
    hsl: NDArray[np.float64]

    @property
    def chromatic_mask(self) -> NDArray[np.bool_]:
        """Mask over parsed members with enough saturation to carry a hue."""
        return np.array([is_chromatic(s) for s in self.hsl[:, 1]], dtype=np.bool_)

    @property
    def has_chromatic(self) -> bool:
        return bool(np.any(self.chromatic_mask))


def collect_members(colors: Sequence[str], family: HueFamily) -> GroupMembers:
    """Parse group members, dropping unparseable colors from the statistics."""
    parsed: list[str] = []
    hsl_rows: list[tuple[float, float, float]] = []

    for hex_color in colors:
        try:
            hsl_rows.append(hex_to_hsl(hex_color))
        except InvalidColorError:
            logger.debug(f"Skipping unparseable color {hex_color!r} in {family.value}")
            continue
        parsed.append(hex_color)

    hsl = np.array(hsl_rows, dtype=np.float64).reshape(-1, 3)
    return GroupMembers(
        family=family,
        colors=tuple(colors),
        parsed=tuple(parsed),
        hsl=hsl,
    )


# =============================================================================
# Estimation Strategies
# =============================================================================


@dataclass(frozen=True)
class HueEstimate:
    """Representative hue (degrees), chroma and lightness (percent) for a group."""
    hue: float
    chroma: float
    lightness: float


@dataclass(frozen=True)
class EstimationStrategy:
    """
    One step of the estimation fallback chain.

    Attributes:
        name: Identifier used in logs
        applies: Precondition on the group
        estimate: Produces the estimate when the precondition holds
        zoned: True if multi-zone analysis may follow this estimate
    """
    name: str
    applies: Callable[[GroupMembers], bool]
    estimate: Callable[[GroupMembers], HueEstimate]
    zoned: bool = False


def _estimate_neutral(members: GroupMembers) -> HueEstimate:
    ref = REFERENCE_FAMILIES[members.family]
    if len(members.parsed) == 0:
        lightness = FALLBACK_LIGHTNESS
    else:
        lightness = float(np.mean(members.hsl[:, 2]))
    return HueEstimate(hue=ref.hue, chroma=NEUTRAL_CHROMA, lightness=lightness)


def _estimate_reference(members: GroupMembers) -> HueEstimate:
    ref = REFERENCE_FAMILIES[members.family]
    return HueEstimate(hue=ref.hue, chroma=FALLBACK_CHROMA, lightness=FALLBACK_LIGHTNESS)


def _estimate_chromatic(members: GroupMembers) -> HueEstimate:
    chromatic = members.hsl[members.chromatic_mask]
    return HueEstimate(
        hue=circular_mean(chromatic[:, 0]),
        chroma=float(np.mean(chromatic[:, 1])),
        lightness=float(np.mean(chromatic[:, 2])),
    )


ESTIMATION_STRATEGIES: tuple[EstimationStrategy, ...] = (
    EstimationStrategy(
        name="neutral_family",
        applies=lambda m: m.family.is_neutral,
        estimate=_estimate_neutral,
    ),
    EstimationStrategy(
        name="no_chromatic_members",
        applies=lambda m: not m.has_chromatic,
        estimate=_estimate_reference,
    ),
    EstimationStrategy(
        name="chromatic_mean",
        applies=lambda m: True,
        estimate=_estimate_chromatic,
        zoned=True,
    ),
)


def select_strategy(members: GroupMembers) -> EstimationStrategy:
    """First strategy in ESTIMATION_STRATEGIES whose precondition holds."""
    for strategy in ESTIMATION_STRATEGIES:
        if strategy.applies(members):
            return strategy
    # chromatic_mean always applies
    raise AssertionError("No estimation strategy applies")


# =============================================================================
# Multi-Zone
# =============================================================================


@dataclass(frozen=True)
class ZoneSplit:
    """Chromatic members partitioned by lightness, with their hues."""
    highlights: tuple[str, ...]
    midtones: tuple[str, ...]
    shadows: tuple[str, ...]
    highlight_hues: tuple[float, ...]
    midtone_hues: tuple[float, ...]
    shadow_hues: tuple[float, ...]


def split_zones(
    hexes: Sequence[str],
    hsl: NDArray[np.float64],
    highlight_threshold: float = 66.0,
    shadow_threshold: float = 33.0,
) -> ZoneSplit:
    """
    Split colors into highlight, midtone and shadow zones by lightness.

    Args:
        hexes: Member hex values
        hsl: (N, 3) HSL array aligned with hexes
        highlight_threshold: L at or above this is a highlight
        shadow_threshold: L below this is a shadow
    """
    zones: dict[str, tuple[list[str], list[float]]] = {
        "highlight": ([], []),
        "midtone": ([], []),
        "shadow": ([], []),
    }

    for hex_color, (h, _, lightness) in zip(hexes, hsl):
        if lightness >= highlight_threshold:
            key = "highlight"
        elif lightness >= shadow_threshold:
            key = "midtone"
        else:
            key = "shadow"
        zones[key][0].append(hex_color)
        zones[key][1].append(float(h))

    return ZoneSplit(
        highlights=tuple(zones["highlight"][0]),
        midtones=tuple(zones["midtone"][0]),
        shadows=tuple(zones["shadow"][0]),
        highlight_hues=tuple(zones["highlight"][1]),
        midtone_hues=tuple(zones["midtone"][1]),
        shadow_hues=tuple(zones["shadow"][1]),
    )


def backfill_zone_hues(
    highlight: Optional[float],
    midtone: Optional[float],
    shadow: Optional[float],
    fallback: float,
) -> tuple[float, float, float]:
    """
    Fill in hues for empty zones.

    Missing zones take the hue of the first populated zone in
    highlight, midtone, shadow order. If every zone is empty all three
    take the fallback hue.
    """
    available = [h for h in (highlight, midtone, shadow) if h is not None]
    fill = available[0] if available else fallback

    return (
        highlight if highlight is not None else fill,
        midtone if midtone is not None else fill,
        shadow if shadow is not None else fill,
    )


def blend_midtone(highlight: float, midtone: float, shadow: float) -> float:
    """Pull the midtone hue halfway toward the midpoint of shadow and highlight."""
    extremes = interpolate_hue(shadow, highlight, 0.5)
    return interpolate_hue(midtone, extremes, 0.5)


def _zone_hue(hues: tuple[float, ...]) -> Optional[float]:
    return circular_mean(hues) if hues else None


# =============================================================================
# Group Analysis
# =============================================================================


def analyze_group(
    colors: Sequence[str],
    family: HueFamily,
    config: Optional[MultiZoneConfig] = None,
) -> GroupAnalysis:
    """
    Compute hue statistics for one hue group.

    Args:
        colors: Member hex values (all classified into family)
        family: The group's hue family
        config: Multi-zone settings. None or enabled=False gives a
            single-hue analysis.

    Returns:
        MultiZoneHueAnalysis if multi-zone mode is enabled and the group
        has chromatic members, otherwise SingleHueAnalysis. usage is left
        at 0; callers that know occurrence counts fill it in.
    """
    members = collect_members(colors, family)
    strategy = select_strategy(members)
    estimate = strategy.estimate(members)

    logger.debug(
        f"{family.value}: {len(members.colors)} colors, strategy={strategy.name}, "
        f"hue={estimate.hue:.1f} chroma={estimate.chroma:.1f} "
        f"lightness={estimate.lightness:.1f}"
    )

    if config is None or not config.enabled or not strategy.zoned:
        return SingleHueAnalysis(
            family=family,
            colors=members.colors,
            avg_hue=estimate.hue,
            avg_chroma=estimate.chroma,
            avg_lightness=estimate.lightness,
        )

    mask = members.chromatic_mask
    chromatic_hexes = [h for h, keep in zip(members.parsed, mask) if keep]
    split = split_zones(
        chromatic_hexes,
        members.hsl[mask],
        config.highlight_threshold,
        config.shadow_threshold,
    )

    highlight, midtone, shadow = backfill_zone_hues(
        _zone_hue(split.highlight_hues),
        _zone_hue(split.midtone_hues),
        _zone_hue(split.shadow_hues),
        fallback=estimate.hue,
    )
    midtone = blend_midtone(highlight, midtone, shadow)

    return MultiZoneHueAnalysis(
        family=family,
        colors=members.colors,
        avg_hue=estimate.hue,
        avg_chroma=estimate.chroma,
        avg_lightness=estimate.lightness,
        highlight_hue=highlight,
        midtone_hue=midtone,
        shadow_hue=shadow,
        highlight_colors=split.highlights,
        midtone_colors=split.midtones,
        shadow_colors=split.shadows,
    )
