import numpy as np
import pytest

from electrophoresis.config import DEFAULT_CONFIG
from electrophoresis.view.widgets.migration_plot import MigrationPlot


def test_lane_data_is_distance_from_well(qapp, controller, clock):
    plot = MigrationPlot(DEFAULT_CONFIG)
    controller.load_lanes()
    plot.set_fragments(list(controller.state.registry))

    sizes, distances = plot.lane_data(1)
    np.testing.assert_allclose(sizes, [100, 200, 500, 1000, 2000])
    np.testing.assert_allclose(distances, 0.0)

    controller.start()
    clock.advance(1.0)
    controller.on_frame()
    plot.update_fragments()

    sizes, distances = plot.lane_data(2)
    assert distances[0] == pytest.approx(30.0)  # 300 bp at 100 V
    assert distances[0] > distances[1]


def test_one_series_per_lane(qapp, controller):
    plot = MigrationPlot(DEFAULT_CONFIG)
    controller.load_lanes()
    plot.set_fragments(list(controller.state.registry))
    assert sorted(plot.series) == [1, 2, 3, 4]

    plot.set_fragments([])
    assert plot.series == {}
