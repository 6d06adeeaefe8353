"""Shared test fixtures."""
from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from volcanoviz.model.records import VolcanoRecord


def make_record(
    name: str = "Test",
    lon: float = 0.0,
    lat: float = 0.0,
    elev: float = 0.0,
    type_label: str = "Stratovolcano",
    country: str = "Nowhere",
) -> VolcanoRecord:
    return VolcanoRecord(
        name=name,
        type_label=type_label,
        country=country,
        elevation_m=elev,
        last_eruption="Unknown",
        longitude=lon,
        latitude=lat,
    )


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def world_records() -> list[VolcanoRecord]:
    """Two corner records pin the extrema to the full globe and 0..5000 m."""
    return [
        make_record("SouthWest", lon=-180.0, lat=-90.0, elev=0.0, type_label="Shield"),
        make_record("NorthEast", lon=180.0, lat=90.0, elev=5000.0, type_label="Submarine"),
        make_record("Center", lon=0.0, lat=0.0, elev=2500.0, type_label="Stratovolcano"),
    ]


@pytest.fixture
def csv_text() -> str:
    return (
        "Volcano Name,Country,Latitude,Longitude,Elevation (m),TypeCategory,Last Known Eruption\n"
        "Fujisan,Japan,35.3606,138.7274,3776,Stratovolcano,1707 CE\n"
        "Kilauea,United States,19.421,-155.287,1222,Shield,2024 CE\n"
        "Seamount,Unknown,,,-1200,Submarine,Unknown\n"
        "Kuwae,Vanuatu,-16.829,168.536,unknown,Caldera,1974 CE\n"
        "Vesuvius,Italy,40.821,14.426,1281,,1944 CE\n"
    )
