"""Tests for frame rendering into an offscreen image."""
import pytest
from PySide6.QtGui import QColor, QImage, QPainter

from volcanoviz.config import BACKGROUND_COLOR, DEFAULT_DATA_PATH
from volcanoviz.model.state import VisualizationState
from volcanoviz.model.records import load_records
from volcanoviz.view.renderer import coordinates_text, format_number, render, to_qcolor, tooltip_text
from volcanoviz.model.colors import Rgba

from conftest import make_record


def _render(state, hovered=None) -> QImage:
    image = QImage(state.width, state.height, QImage.Format.Format_ARGB32)
    image.fill(QColor("magenta"))
    painter = QPainter(image)
    try:
        render(painter, state, hovered)
    finally:
        painter.end()
    return image


@pytest.fixture
def state(qapp):
    records = [
        make_record("SouthWest", lon=-180, lat=-90, elev=0),
        make_record("NorthEast", lon=180, lat=90, elev=5000),
        # Tallest volcano, drawn 15 px wide at the canvas center
        make_record("Center", lon=0, lat=0, elev=5000, type_label="Stratovolcano"),
    ]
    return VisualizationState.from_records(records, 800, 600)


class TestRender:

    def test_background_fills_canvas(self, state):
        image = _render(state)
        background = QColor(BACKGROUND_COLOR)

        assert image.pixelColor(2, 2) == background
        assert image.pixelColor(795, 150) == background

    def test_marker_is_drawn(self, state):
        image = _render(state)
        assert image.pixelColor(400, 300) != QColor(BACKGROUND_COLOR)

    def test_hovered_marker_grows(self, state):
        center = state.markers[2]
        # ~8.6 px from the center: outside the 7.5 px disk, inside the 9.5 px hovered disk
        probe = (408, 298)

        plain = _render(state)
        hovered = _render(state, hovered=center)

        assert plain.pixelColor(*probe) == QColor(BACKGROUND_COLOR)
        assert hovered.pixelColor(*probe) != QColor(BACKGROUND_COLOR)

    def test_empty_state_renders(self, qapp):
        state = VisualizationState.from_records([], 640, 480)
        image = _render(state)
        assert image.pixelColor(320, 240) != QColor("magenta")


    def test_infinite_values_never_reach_the_frame(self, qapp, tmp_path):
        path = tmp_path / "inf.csv"
        path.write_text(
            "Volcano Name,Country,Latitude,Longitude,Elevation (m),TypeCategory,Last Known Eruption\n"
            "A,X,10,20,100,Shield,2000 CE\n"
            "B,Y,11,inf,200,Shield,2001 CE\n"
            "C,Z,-40,-70,900,Stratovolcano,2002 CE\n",
            encoding="utf-8",
        )
        state = VisualizationState.load(path, 800, 600)

        assert state.extrema.max_lon == 20
        image = _render(state, hovered=state.markers[-1])
        assert image.pixelColor(2, 2) == QColor(BACKGROUND_COLOR)


class TestHelpers:

    def test_to_qcolor(self):
        color = to_qcolor(Rgba(1, 2, 3, 150))
        assert (color.red(), color.green(), color.blue(), color.alpha()) == (1, 2, 3, 150)

    @pytest.mark.parametrize("value, text", [
        (3776.0, "3776"),
        (-185.0, "-185"),
        (138.7274, "138.7274"),
        (-155.287, "-155.287"),
        (0.5, "0.5"),
    ])
    def test_format_number(self, value, text):
        assert format_number(value) == text

    def test_format_number_round_trips(self):
        for value in [138.7274, 35.3606, -0.677, 19.421, 0.1 + 0.2, 1e-7]:
            assert float(format_number(value)) == value


class TestHoverText:

    def test_readout_shows_raw_coordinates(self):
        fuji = load_records(DEFAULT_DATA_PATH)[0]
        assert coordinates_text(fuji) == "Longitude: 138.7274°, Latitude: 35.3606°"

    def test_tooltip_lines(self):
        fuji = load_records(DEFAULT_DATA_PATH)[0]
        assert tooltip_text(fuji).split("\n") == ["Fujisan (Stratovolcano)", "Japan, 3776 m"]

    def test_hovered_frame_renders_on_bundled_dataset(self, qapp):
        state = VisualizationState.load(DEFAULT_DATA_PATH, 800, 600)
        image = _render(state, hovered=state.markers[0])
        assert image.pixelColor(2, 2) == QColor(BACKGROUND_COLOR)
