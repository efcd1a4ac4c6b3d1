"""
Gel View (Renderer)
===================
Draws the gel box, its wells and one band per fragment.

The widget only reads fragment state handed to it by the controller signals;
it never moves a fragment itself. Band items are keyed by fragment id.
"""
from __future__ import annotations

import logging
from typing import Iterable

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtWidgets import (
    QGraphicsRectItem, QGraphicsScene, QGraphicsSimpleTextItem, QGraphicsView, QWidget
)

from electrophoresis.config import DEFAULT_CONFIG, LADDER_LANE, GelConfig
from electrophoresis.model.fragment import Fragment

logger = logging.getLogger(__name__)

GEL_COLOR = QColor(214, 228, 236)
WELL_COLOR = QColor(90, 100, 110)
BAND_COLOR = QColor(40, 90, 200, 220)
FINISHED_BAND_COLOR = QColor(40, 90, 200, 120)
BAND_HEIGHT = 6.0
WELL_HEIGHT = 8.0


class GelView(QGraphicsView):
    def __init__(self, config: GelConfig = DEFAULT_CONFIG, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.config = config
        self.setRenderHints(self.renderHints() | QPainter.Antialiasing | QPainter.TextAntialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setMinimumSize(320, 320)

        self.scene = QGraphicsScene(self)
        self.setScene(self.scene)

        self._band_items: dict[int, QGraphicsRectItem] = {}
        self._draw_gel()

    # --- PUBLIC API ---

    @property
    def band_items(self) -> dict[int, QGraphicsRectItem]:
        return dict(self._band_items)

    def lane_x(self, lane_index: int) -> float:
        """Left edge of a band centred in the well of the given lane."""
        well_width = self.config.gel_width / self.config.well_count
        return (lane_index - 1) * well_width + well_width / 2 - self.config.band_width / 2

    def set_fragments(self, fragments: list[Fragment]) -> None:
        """Drop all bands and create one per fragment (after load/reset)."""
        for item in self._band_items.values():
            self.scene.removeItem(item)
        self._band_items.clear()

        for fragment in fragments:
            self._band_items[fragment.fragment_id] = self._create_band(fragment)
        logger.debug(f"Gel view shows {len(self._band_items)} bands.")

    def update_fragments(self, fragments: Iterable[Fragment]) -> None:
        for fragment in fragments:
            item = self._band_items.get(fragment.fragment_id)
            if item is None:
                continue
            item.setY(fragment.position)
            if fragment.finished:
                item.setBrush(QBrush(FINISHED_BAND_COLOR))

    # --- INTERNAL ---

    def _draw_gel(self) -> None:
        cfg = self.config
        gel = self.scene.addRect(
            QRectF(0.0, 0.0, cfg.gel_width, cfg.gel_length),
            QPen(QColor(0, 0, 0), 0),
            QBrush(GEL_COLOR),
        )
        gel.setZValue(-2)

        for lane in range(1, cfg.well_count + 1):
            well = self.scene.addRect(
                QRectF(self.lane_x(lane), 2.0, cfg.band_width, WELL_HEIGHT),
                QPen(Qt.NoPen),
                QBrush(WELL_COLOR),
            )
            well.setZValue(-1)

            number = QGraphicsSimpleTextItem(str(lane))
            number.setPos(self.lane_x(lane) + cfg.band_width / 2 - 3, -16.0)
            self.scene.addItem(number)

        self.scene.setSceneRect(QRectF(-40.0, -20.0, cfg.gel_width + 80.0, cfg.gel_length + 30.0))

    def _create_band(self, fragment: Fragment) -> QGraphicsRectItem:
        # Local rect at y=0 so moving the band is a single setY()
        item = QGraphicsRectItem(QRectF(0.0, 0.0, self.config.band_width, BAND_HEIGHT))
        item.setPen(QPen(Qt.NoPen))
        item.setBrush(QBrush(BAND_COLOR if not fragment.finished else FINISHED_BAND_COLOR))
        item.setPos(self.lane_x(fragment.lane_index), fragment.position)
        item.setToolTip(fragment.label)

        # Size labels for the marker lane
        if fragment.lane_index == LADDER_LANE:
            label = QGraphicsSimpleTextItem(f"{fragment.size_bp:g}", item)
            label.setPos(-label.boundingRect().width() - 4, -4.0)

        self.scene.addItem(item)
        return item

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.fitInView(self.scene.sceneRect(), Qt.KeepAspectRatio)
