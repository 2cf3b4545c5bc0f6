import numpy as np
import pytest

from bcanalysis.config import Settings
from bcanalysis.core import AnalysisMode, BeforeClosureAnalysis, compute
from bcanalysis.errors import EmptyInputError, ShapeMismatchError
from bcanalysis.types import CursorReadout

TIME = [0.0, 1.0, 4.0, 9.0, 16.0]
PRESSURE = [100.0, 90.0, 80.0, 70.0, 60.0]


def test_defaults():
    analysis = BeforeClosureAnalysis(TIME, PRESSURE)
    assert analysis.mode is AnalysisMode.SQUARE_ROOT_TIME
    assert analysis.window == 15
    assert len(analysis) == 5
    assert analysis.cursor_index is None


def test_record_is_copied_and_read_only():
    t = np.array(TIME)
    analysis = BeforeClosureAnalysis(t, PRESSURE)
    t[0] = 99.0
    assert analysis.elapsed_time[0] == 0.0
    with pytest.raises(ValueError):
        analysis.pressure[0] = 1.0


def test_series_is_cached_until_mode_changes():
    analysis = BeforeClosureAnalysis(TIME, PRESSURE, window=1)
    first = analysis.series
    assert analysis.series is first
    analysis.mode = "g"
    second = analysis.series
    assert second is not first
    assert second.mode is AnalysisMode.G_FUNCTION
    np.testing.assert_array_equal(second.x, compute("g", TIME, PRESSURE, 1).x)


def test_window_change_recomputes():
    analysis = BeforeClosureAnalysis(TIME, PRESSURE, window=1)
    analysis.cursor(2.0)
    assert analysis.cursor_index == 2
    analysis.window = 2
    assert analysis.cursor_index is None
    assert analysis.series.window == 2
    with pytest.raises(ValueError):
        analysis.window = -1


def test_cursor_readout():
    analysis = BeforeClosureAnalysis(TIME, PRESSURE, window=1)
    readout = analysis.cursor(2.2)
    assert isinstance(readout, CursorReadout)
    assert readout.index == 2
    assert readout.x == pytest.approx(2.0)
    assert readout.pressure == 80.0
    assert readout.dx == pytest.approx(-10.0)
    assert readout.xdx == pytest.approx(-20.0)
    assert analysis.cursor_index == 2


def test_settings_defaults():
    settings = Settings(analysis={"mode": "g", "window": 3})
    analysis = BeforeClosureAnalysis(TIME, PRESSURE, settings=settings)
    assert analysis.mode is AnalysisMode.G_FUNCTION
    assert analysis.series.window == 3


def test_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        BeforeClosureAnalysis([0.0, 1.0], [1.0])


def test_single_sample_record():
    analysis = BeforeClosureAnalysis([0.0], [10.0])
    assert analysis.series.dx.tolist() == [0.0]
    assert analysis.cursor(5.0).index == 0


def test_empty_record_cursor():
    analysis = BeforeClosureAnalysis([], [])
    assert len(analysis.series) == 0
    with pytest.raises(EmptyInputError):
        analysis.cursor(0.0)


@pytest.mark.parametrize("window", [2.5, True, -1])
def test_invalid_window_rejected(window):
    with pytest.raises(ValueError):
        BeforeClosureAnalysis(TIME, PRESSURE, window=window)
    analysis = BeforeClosureAnalysis(TIME, PRESSURE, window=1)
    with pytest.raises(ValueError):
        analysis.window = window
    assert analysis.window == 1
