# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Nearest-color queries against generated schemes.

Distances are Euclidean in 8-bit RGB. Ties go to the first shade
encountered, iterating schemes in their stored order and shades lightest
first.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Union

import numpy as np

from huescheme.schema import GeneratedScheme, HueFamily, SchemeAnalysis, SchemeMatch
from huescheme.scheme.colorspace import rgb_distance_batch

SchemeSource = Union[SchemeAnalysis, Iterable[GeneratedScheme]]

# Returned by find_closest_scheme_color when there are no schemes
DEFAULT_MATCH = SchemeMatch(
    color="#000000",
    family=HueFamily.GRAY,
    shade=9,
    scheme_name="Gray",
    distance=math.inf,
)


def _schemes(source: SchemeSource) -> tuple[GeneratedScheme, ...]:
    if isinstance(source, SchemeAnalysis):
        return source.schemes
    return tuple(source)


def _candidates(schemes: tuple[GeneratedScheme, ...]) -> list[tuple[GeneratedScheme, int]]:
    return [
        (scheme, shade_index)
        for scheme in schemes
        for shade_index in range(len(scheme.shades))
    ]


def _match(scheme: GeneratedScheme, shade_index: int, distance: float) -> SchemeMatch:
    return SchemeMatch(
        color=scheme.shades[shade_index],
        family=scheme.family,
        shade=shade_index,
        scheme_name=scheme.name,
        distance=float(distance),
    )


def _distances(query: str, candidates: list[tuple[GeneratedScheme, int]]) -> np.ndarray:
    return rgb_distance_batch(query, [scheme.shades[i] for scheme, i in candidates])


def find_closest_scheme_color(query: str, source: SchemeSource) -> SchemeMatch:
    """
    Closest shade across every generated scheme.

    Args:
        query: Hex color to match
        source: SchemeAnalysis or iterable of GeneratedScheme

    Returns:
        SchemeMatch. DEFAULT_MATCH (black, gray-9, infinite distance) when
        there are no schemes. An unparseable query matches the first shade
        at INVALID_DISTANCE.
    """
    candidates = _candidates(_schemes(source))
    if not candidates:
        return DEFAULT_MATCH

    distances = _distances(query, candidates)
    best = int(np.argmin(distances))  # First occurrence on ties
    scheme, shade_index = candidates[best]
    return _match(scheme, shade_index, distances[best])


def find_closest_scheme_colors(
    query: str,
    source: SchemeSource,
    count: int = 5,
) -> tuple[SchemeMatch, ...]:
    """
    The count closest shades, nearest first.

    Equal distances keep scheme / shade iteration order.
    """
    candidates = _candidates(_schemes(source))
    if not candidates or count <= 0:
        return ()

    distances = _distances(query, candidates)
    order = np.argsort(distances, kind="stable")[:count]
    return tuple(_match(*candidates[i], distances[i]) for i in order)


def find_closest_color_in_family(
    query: str,
    family: HueFamily,
    source: SchemeSource,
) -> Optional[SchemeMatch]:
    """
    Closest shade within one family's scheme.

    Returns:
        SchemeMatch, or None if the family has no generated scheme
    """
    scheme = next((s for s in _schemes(source) if s.family is family), None)
    if scheme is None:
        return None

    return find_closest_scheme_color(query, (scheme,))
