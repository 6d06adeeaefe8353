"""
Volcano Records
===============
Loading of the tabular volcano dataset into immutable records.

Only three columns are numeric: longitude, latitude and elevation. A row whose
numeric fields do not parse is dropped entirely; the remaining columns are
kept as plain text.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

COL_LONGITUDE = "Longitude"
COL_LATITUDE = "Latitude"
COL_ELEVATION = "Elevation (m)"
COL_TYPE = "TypeCategory"
COL_NAME = "Volcano Name"
COL_COUNTRY = "Country"
COL_LAST_ERUPTION = "Last Known Eruption"

REQUIRED_COLUMNS: tuple[str, ...] = (
    COL_LONGITUDE,
    COL_LATITUDE,
    COL_ELEVATION,
    COL_TYPE,
    COL_NAME,
    COL_COUNTRY,
    COL_LAST_ERUPTION,
)

NUMERIC_COLUMNS: tuple[str, ...] = (COL_LONGITUDE, COL_LATITUDE, COL_ELEVATION)


class DatasetError(ValueError):
    """Raised when the dataset file cannot be read or lacks required columns."""


@dataclass(frozen=True)
class VolcanoRecord:
    name: str
    type_label: str
    country: str
    elevation_m: float
    last_eruption: str
    longitude: float
    latitude: float


@dataclass(frozen=True)
class Extrema:
    """Dataset-wide min/max of the mapped fields, computed once after load."""
    min_lon: float
    max_lon: float
    min_lat: float
    max_lat: float
    min_elev: float
    max_elev: float


def load_records(path: str | os.PathLike[str]) -> list[VolcanoRecord]:
    """
    Read the CSV at `path` into records, preserving row order.

    Args:
        path: Path to a CSV file with a header row.

    Returns:
        One record per row whose longitude, latitude and elevation are numeric.

    Raises:
        DatasetError: If the file is missing, unreadable or lacks a required column.
    """
    logger.info(f"Loading volcano dataset from: {path}")
    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"Could not read dataset '{path}': {e}")
        raise DatasetError(f"Could not read dataset '{path}': {e}") from e

    missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
    if missing:
        msg = f"Dataset '{path}' is missing columns: {', '.join(missing)}"
        logger.error(msg)
        raise DatasetError(msg)

    return records_from_frame(frame)


def records_from_frame(frame: pd.DataFrame) -> list[VolcanoRecord]:
    """Convert an all-text DataFrame into records, skipping non-numeric rows."""
    numeric = pd.DataFrame(
        {col: pd.to_numeric(frame[col].astype(str).str.strip(), errors="coerce") for col in NUMERIC_COLUMNS},
        index=frame.index,
    )
    # NaN and +/-inf both count as unparseable
    valid = np.isfinite(numeric.to_numpy(dtype=np.float64)).all(axis=1)

    skipped = int((~valid).sum())
    if skipped:
        logger.debug(f"Skipped {skipped} rows with non-numeric coordinates or elevation.")

    records = [
        VolcanoRecord(
            name=str(row[COL_NAME]),
            type_label=str(row[COL_TYPE]),
            country=str(row[COL_COUNTRY]),
            elevation_m=float(numeric.at[idx, COL_ELEVATION]),
            last_eruption=str(row[COL_LAST_ERUPTION]),
            longitude=float(numeric.at[idx, COL_LONGITUDE]),
            latitude=float(numeric.at[idx, COL_LATITUDE]),
        )
        for idx, row in frame[valid].iterrows()
    ]

    logger.info(f"Loaded {len(records)} volcanoes ({skipped} rows skipped).")
    return records


def compute_extrema(records: list[VolcanoRecord]) -> Extrema:
    """
    Compute min/max longitude, latitude and elevation over all records.

    An empty dataset yields all-zero extrema.
    """
    if not records:
        return Extrema(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    values = np.array(
        [(r.longitude, r.latitude, r.elevation_m) for r in records],
        dtype=np.float64,
    )
    lo = values.min(axis=0)
    hi = values.max(axis=0)
    return Extrema(
        min_lon=float(lo[0]), max_lon=float(hi[0]),
        min_lat=float(lo[1]), max_lat=float(hi[1]),
        min_elev=float(lo[2]), max_elev=float(hi[2]),
    )
