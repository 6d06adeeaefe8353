"""
Data-to-Pixel Mapping
=====================
Derives screen-space markers from volcano records for a given canvas size.

All mapping runs against the cached dataset extrema, so a resize only moves
markers; it never changes which value lands on the plot edge.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from volcanoviz.config import OUTER_MARGIN, MIN_MARKER_SIZE, MAX_MARKER_SIZE, GRID_STEP_DEGREES
from volcanoviz.model.colors import Rgba, classify
from volcanoviz.model.records import VolcanoRecord, Extrema


@dataclass(frozen=True)
class VolcanoMarker:
    """
    One volcano placed on the canvas.

    `radius` is the drawn disk's diameter in pixels; the hover zone is the
    disk itself, i.e. `radius / 2` around the center.
    """
    x: float
    y: float
    radius: float
    fill_color: Rgba
    record: VolcanoRecord


def lerp(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """
    Linearly map `value` from [in_min, in_max] onto [out_min, out_max].

    Values outside the input range are extrapolated, not clamped.
    A zero-width input range maps everything to the middle of the output range.
    """
    span = in_max - in_min
    if span == 0:
        return (out_min + out_max) / 2.0
    return out_min + (value - in_min) * (out_max - out_min) / span


def lon_to_x(lon: float, extrema: Extrema, width: float) -> float:
    return lerp(lon, extrema.min_lon, extrema.max_lon, OUTER_MARGIN, width - OUTER_MARGIN)


def lat_to_y(lat: float, extrema: Extrema, height: float) -> float:
    # Screen y grows downwards: higher latitudes sit closer to the top.
    return lerp(lat, extrema.min_lat, extrema.max_lat, height - OUTER_MARGIN, OUTER_MARGIN)


def elevation_to_radius(elev: float, extrema: Extrema) -> float:
    return lerp(elev, extrema.min_elev, extrema.max_elev, MIN_MARKER_SIZE, MAX_MARKER_SIZE)


def build_markers(records: Sequence[VolcanoRecord], extrema: Extrema, width: float, height: float) -> list[VolcanoMarker]:
    """Build a fresh marker list, one per record, in record order."""
    return [
        VolcanoMarker(
            x=lon_to_x(r.longitude, extrema, width),
            y=lat_to_y(r.latitude, extrema, height),
            radius=elevation_to_radius(r.elevation_m, extrema),
            fill_color=classify(r.type_label),
            record=r,
        )
        for r in records
    ]


def grid_ticks(lo: float, hi: float, step: int = GRID_STEP_DEGREES) -> list[int]:
    """Multiples of `step` inside [lo, hi]."""
    if step <= 0 or not (math.isfinite(lo) and math.isfinite(hi)) or hi < lo:
        return []
    first = math.ceil(lo / step) * step
    return list(range(first, math.floor(hi) + 1, step))


def hit_test(markers: Sequence[VolcanoMarker], px: float, py: float) -> Optional[VolcanoMarker]:
    """
    Find the marker under the pointer.

    A marker is hit when the pointer lies strictly inside its disk. When disks
    overlap, the last hit in sequence order wins, which is also the one drawn
    on top.
    """
    hovered: Optional[VolcanoMarker] = None
    for marker in markers:
        if math.hypot(px - marker.x, py - marker.y) < marker.radius / 2:
            hovered = marker
    return hovered
