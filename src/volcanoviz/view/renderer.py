"""
Frame Renderer
==============
Draws one complete frame of the volcano plot onto a QPainter.

Every helper saves and restores the painter around its own shape, so no pen,
brush or font leaks from one element into the next. The caller owns the
painter; this module only issues drawing commands.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QColor, QFont, QPainter, QPen

from volcanoviz import config
from volcanoviz.model.colors import Rgba, LEGEND_ENTRIES
from volcanoviz.model.mapping import VolcanoMarker, grid_ticks, lat_to_y, lon_to_x
from volcanoviz.model.records import VolcanoRecord
from volcanoviz.model.state import VisualizationState

# Large enough to hold any single label; text is aligned inside it against the anchor.
_TEXT_BOX = 10000.0


def to_qcolor(color: Rgba) -> QColor:
    return QColor(color.r, color.g, color.b, color.a)


def format_number(value: float) -> str:
    """Shortest text that reads back as the same float; whole numbers drop the '.0'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def tooltip_text(record: VolcanoRecord) -> str:
    return f"{record.name} ({record.type_label})\n{record.country}, {format_number(record.elevation_m)} m"


def coordinates_text(record: VolcanoRecord) -> str:
    return f"Longitude: {format_number(record.longitude)}°, Latitude: {format_number(record.latitude)}°"


def render(painter: QPainter, state: VisualizationState, hovered: Optional[VolcanoMarker] = None) -> None:
    """Draw background, grid, markers, hover details, title and legend."""
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)

    draw_background(painter, state.width, state.height)
    draw_grid(painter, state)

    for marker in state.markers:
        draw_marker(painter, marker, highlight=marker is hovered)

    if hovered is not None:
        draw_tooltip(
            painter,
            hovered.x + config.TOOLTIP_OFFSET[0],
            hovered.y + config.TOOLTIP_OFFSET[1],
            tooltip_text(hovered.record),
        )
        draw_coordinates(painter, hovered, state.width, state.height)

    draw_title(painter, state.width)
    draw_legend(painter, state.height)


# ------------------------------------------------------------------------------
# Elements
# ------------------------------------------------------------------------------

def draw_background(painter: QPainter, width: int, height: int) -> None:
    painter.fillRect(QRectF(0, 0, width, height), QColor(config.BACKGROUND_COLOR))


def draw_grid(painter: QPainter, state: VisualizationState) -> None:
    """Dashed meridians/parallels every GRID_STEP_DEGREES with degree labels on the plot edge."""
    ext = state.extrema
    margin = config.OUTER_MARGIN
    width, height = state.width, state.height
    pad = config.GRID_LABEL_PAD

    pen = QPen(QColor(config.GRID_LINE_GRAY, config.GRID_LINE_GRAY, config.GRID_LINE_GRAY))
    pen.setWidthF(1.0)
    pen.setDashPattern(list(config.GRID_DASH_PATTERN))
    label_color = QColor(config.GRID_LABEL_GRAY, config.GRID_LABEL_GRAY, config.GRID_LABEL_GRAY)

    painter.save()
    painter.setFont(_font(config.LABEL_FONT_SIZE))

    for lon in grid_ticks(ext.min_lon, ext.max_lon):
        x = lon_to_x(lon, ext, width)
        painter.setPen(pen)
        painter.drawLine(QPointF(x, margin), QPointF(x, height - margin))
        _draw_text(painter, x, height - margin + pad, f"{lon}°", label_color,
                   Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)

    for lat in grid_ticks(ext.min_lat, ext.max_lat):
        y = lat_to_y(lat, ext, height)
        painter.setPen(pen)
        painter.drawLine(QPointF(margin, y), QPointF(width - margin, y))
        _draw_text(painter, margin - pad, y, f"{lat}°", label_color,
                   Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

    painter.restore()


def draw_marker(painter: QPainter, marker: VolcanoMarker, highlight: bool = False) -> None:
    """
    Filled disk of diameter `marker.radius`.

    A highlighted marker grows by HOVER_GROWTH and gets a white ring another
    HOVER_GROWTH wider.
    """
    size = marker.radius + config.HOVER_GROWTH if highlight else marker.radius
    center = QPointF(marker.x, marker.y)

    painter.save()
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(to_qcolor(marker.fill_color))
    painter.drawEllipse(center, size / 2, size / 2)

    if highlight:
        ring = size + config.HOVER_GROWTH
        painter.setPen(QPen(QColor("white"), 1.0))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(center, ring / 2, ring / 2)

    painter.restore()


def draw_tooltip(painter: QPainter, x: float, y: float, text: str) -> None:
    painter.save()
    painter.setFont(_font(config.TOOLTIP_FONT_SIZE))
    _draw_text(painter, x, y, text, QColor("white"),
               Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
    painter.restore()


def draw_coordinates(painter: QPainter, marker: VolcanoMarker, width: int, height: int) -> None:
    """Raw longitude/latitude of the hovered volcano in the bottom-right corner."""
    text = coordinates_text(marker.record)
    inset_x, inset_y = config.READOUT_INSET

    painter.save()
    painter.setFont(_font(config.TOOLTIP_FONT_SIZE))
    _draw_text(painter, width - inset_x, height - inset_y, text, QColor("white"),
               Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignBottom)
    painter.restore()


def draw_title(painter: QPainter, width: int) -> None:
    painter.save()
    painter.setFont(_font(config.TITLE_FONT_SIZE, bold=True))
    _draw_text(painter, width / 2, config.TITLE_TOP, config.TITLE_TEXT, QColor("white"),
               Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)
    painter.restore()


def draw_legend(painter: QPainter, height: int) -> None:
    """One dot + label per type, laid out left to right along the bottom."""
    legend_y = height - config.LEGEND_BOTTOM_OFFSET
    dot = config.LEGEND_DOT_SIZE

    painter.save()
    painter.setFont(_font(config.LABEL_FONT_SIZE))

    for i, (label, color) in enumerate(LEGEND_ENTRIES):
        x = config.LEGEND_START_X + i * config.LEGEND_SPACING

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(to_qcolor(color))
        painter.drawEllipse(QPointF(x, legend_y), dot / 2, dot / 2)

        _draw_text(painter, x + config.LEGEND_LABEL_GAP, legend_y, label, QColor("white"),
                   Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)

    painter.restore()


# ------------------------------------------------------------------------------
# Text helpers
# ------------------------------------------------------------------------------

def _font(pixel_size: int, bold: bool = False) -> QFont:
    font = QFont()
    font.setPixelSize(pixel_size)
    font.setBold(bold)
    return font


def _draw_text(
    painter: QPainter,
    x: float,
    y: float,
    text: str,
    color: QColor,
    align: Qt.AlignmentFlag,
) -> None:
    """Draw `text` so that the point (x, y) sits on the side(s) named by `align`."""
    if align & Qt.AlignmentFlag.AlignRight:
        left = x - _TEXT_BOX
    elif align & Qt.AlignmentFlag.AlignHCenter:
        left = x - _TEXT_BOX / 2
    else:
        left = x

    if align & Qt.AlignmentFlag.AlignBottom:
        top = y - _TEXT_BOX
    elif align & Qt.AlignmentFlag.AlignVCenter:
        top = y - _TEXT_BOX / 2
    else:
        top = y

    painter.save()
    painter.setPen(color)
    painter.drawText(QRectF(left, top, _TEXT_BOX, _TEXT_BOX), align, text)
    painter.restore()
