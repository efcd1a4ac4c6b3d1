"""Live chart of the distance travelled by each fragment against its size."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QVBoxLayout, QWidget

from electrophoresis.config import DEFAULT_CONFIG, GelConfig

if TYPE_CHECKING:
    import numpy.typing as npt
    from electrophoresis.model.fragment import Fragment

logger = logging.getLogger(__name__)


class MigrationPlot(QWidget):
    """
    Scatter of migration distance vs fragment size (log scale).

    Smaller fragments travel further, so the points of a ladder form the
    familiar standard curve.
    """

    COLORS = [
        '#1f77b4',  # Blue
        '#ff7f0e',  # Orange
        '#2ca02c',  # Green
        '#d62728',  # Red
        '#9467bd',  # Purple
    ]

    def __init__(self, config: GelConfig = DEFAULT_CONFIG, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.config = config
        self._fragments: list[Fragment] = []
        self._scatters: dict[int, pg.PlotDataItem] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'Fragment size [bp]', color='black')
        self.plot_widget.setLabel('left', 'Distance travelled', color='black')
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.setLogMode(x=True, y=False)
        self.plot_widget.setYRange(0, config.travel_limit)
        self.plot_widget.addLegend(offset=(10, 10))

        layout.addWidget(self.plot_widget)

    @property
    def series(self) -> dict[int, pg.PlotDataItem]:
        """One plotted series per lane index."""
        return dict(self._scatters)

    def set_fragments(self, fragments: list[Fragment]) -> None:
        self._fragments = list(fragments)

        self.plot_widget.clear()
        self._scatters.clear()

        lanes = sorted({f.lane_index for f in self._fragments})
        for i, lane in enumerate(lanes):
            color = self.COLORS[i % len(self.COLORS)]
            # PlotDataItem (not a bare scatter) so the log x mode applies
            scatter = self.plot_widget.plot(
                [], [],
                pen=None,
                name=f"Lane {lane}",
                symbol='o',
                symbolSize=8,
                symbolBrush=color,
                symbolPen=None,
            )
            self._scatters[lane] = scatter

        self.refresh()

    def update_fragments(self, _moved: Iterable[Fragment] | None = None) -> None:
        """Redraw from the current fragment positions."""
        self.refresh()

    def refresh(self) -> None:
        for lane, scatter in self._scatters.items():
            sizes, distances = self.lane_data(lane)
            scatter.setData(x=sizes, y=distances)

    def lane_data(self, lane_index: int) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Sizes and travelled distances (from the wells) of one lane."""
        lane = [f for f in self._fragments if f.lane_index == lane_index]
        sizes = np.array([f.size_bp for f in lane], dtype=np.float64)
        distances = np.array([f.position for f in lane], dtype=np.float64) - self.config.initial_offset
        return sizes, distances
