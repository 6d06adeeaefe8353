"""
Visualization State
===================
The single context object handed to the renderer.

Why is this file needed?
------------------------
1. State Management: It holds the loaded records, the cached extrema and the
   current marker sequence in one place instead of module-level globals.
2. Lifecycle: It is built once at startup and replaced wholesale on resize;
   nothing mutates it while a frame is being drawn.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace

from volcanoviz.model.mapping import VolcanoMarker, build_markers
from volcanoviz.model.records import VolcanoRecord, Extrema, compute_extrema, load_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisualizationState:
    records: tuple[VolcanoRecord, ...]
    extrema: Extrema
    width: int
    height: int
    markers: tuple[VolcanoMarker, ...] = field(default=())

    @classmethod
    def from_records(cls, records: list[VolcanoRecord], width: int, height: int) -> VisualizationState:
        """Compute the extrema once and place every record on a width x height canvas."""
        extrema = compute_extrema(records)
        logger.debug(f"Dataset extrema: {extrema}")
        return cls(
            records=tuple(records),
            extrema=extrema,
            width=width,
            height=height,
            markers=tuple(build_markers(records, extrema, width, height)),
        )

    @classmethod
    def load(cls, path: str | os.PathLike[str], width: int, height: int) -> VisualizationState:
        return cls.from_records(load_records(path), width, height)

    def resized(self, width: int, height: int) -> VisualizationState:
        """
        Return a new state for a canvas of the given size.

        Markers are rebuilt from the cached extrema; records and extrema are
        carried over unchanged.
        """
        logger.debug(f"Rebuilding {len(self.records)} markers for {width}x{height} canvas.")
        markers = build_markers(self.records, self.extrema, width, height)
        return replace(self, width=width, height=height, markers=tuple(markers))
