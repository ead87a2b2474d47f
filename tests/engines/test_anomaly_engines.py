#!filepath: tests/engines/test_anomaly_engines.py
import numpy as np
import pytest

from mlsamples.engines.anomaly.base import MIN_HISTORY_FOR_ALERT
from mlsamples.engines.anomaly.iid_changepoint_detect_engine import (
    IidChangePointDetectEngine,
)
from mlsamples.engines.anomaly.iid_spike_detect_engine import IidSpikeDetectEngine
from mlsamples.engines.anomaly.kde_pvalue import EMPTY_HISTORY_PVALUE, kde_pvalue


def _flat_with_spike(n=36, at=20, spike=5000.0):
    rng = np.random.default_rng(0)
    values = 200.0 + rng.normal(0, 10, size=n)
    values[at] = spike
    return values


def test_kde_pvalue_empty_history():
    assert kde_pvalue(1.0, []) == EMPTY_HISTORY_PVALUE


def test_kde_pvalue_far_value_is_small():
    history = [10.0, 11.0, 9.5, 10.5, 10.2]
    assert kde_pvalue(10.1, history) > 0.3
    assert kde_pvalue(100.0, history) < 1e-6


def test_kde_pvalue_sides():
    history = [0.0, 1.0, 2.0]
    assert kde_pvalue(10.0, history, side="right") < 0.01
    assert kde_pvalue(10.0, history, side="left") > 0.99
    with pytest.raises(ValueError):
        kde_pvalue(0.0, history, side="up")


def test_spike_output_shape_and_score():
    values = _flat_with_spike()
    out = IidSpikeDetectEngine(confidence=95.0, pvalue_history_length=9).detect(values)

    assert out.shape == (36, 3)
    np.testing.assert_allclose(out[:, 1], values)
    assert set(np.unique(out[:, 0])) <= {0.0, 1.0}
    assert ((out[:, 2] >= 0) & (out[:, 2] <= 1)).all()


def test_spike_detected_at_outlier():
    out = IidSpikeDetectEngine(confidence=95.0, pvalue_history_length=9).detect(_flat_with_spike())
    assert out[20, 0] == 1.0


def test_no_alert_without_history():
    out = IidSpikeDetectEngine(confidence=95.0, pvalue_history_length=9).detect([1.0, 1000.0, 5.0])
    # second point only has one point of history
    assert out[0, 0] == 0.0
    assert out[1, 0] == 0.0


def test_alerts_once_window_reaches_min_history():
    values = [200.0, 201.0, 5000.0]
    out = IidSpikeDetectEngine(confidence=95.0, pvalue_history_length=9).detect(values)

    assert MIN_HISTORY_FOR_ALERT == 2
    # 5000 has exactly two points of history
    assert out[2, 2] < 0.05
    assert out[:, 0].tolist() == [0.0, 0.0, 1.0]


def test_spike_empty_series():
    out = IidSpikeDetectEngine(confidence=95.0, pvalue_history_length=3).detect([])
    assert out.shape == (0, 3)


@pytest.mark.parametrize("confidence", [0.0, 100.0, -5.0, 150.0])
def test_confidence_bounds(confidence):
    with pytest.raises(ValueError):
        IidSpikeDetectEngine(confidence=confidence, pvalue_history_length=9)
    with pytest.raises(ValueError):
        IidChangePointDetectEngine(confidence=confidence, change_history_length=9)


def test_history_length_bounds():
    with pytest.raises(ValueError):
        IidSpikeDetectEngine(confidence=95.0, pvalue_history_length=0)


def test_martingale_epsilon_bounds():
    with pytest.raises(ValueError):
        IidChangePointDetectEngine(confidence=95.0, change_history_length=9, martingale_epsilon=1.0)


def test_changepoint_martingale_starts_neutral():
    out = IidChangePointDetectEngine(confidence=95.0, change_history_length=9).detect([200.0, 5000.0, 210.0])
    # the first two points have too little history to move the martingale
    np.testing.assert_allclose(out[:2, 3], [1.0, 1.0])
    assert out[:, 0].sum() == 0


def test_changepoint_output_shape():
    values = _flat_with_spike()
    out = IidChangePointDetectEngine(confidence=95.0, change_history_length=9).detect(values)

    assert out.shape == (36, 4)
    np.testing.assert_allclose(out[:, 1], values)
    assert (out[:, 3] > 0).all()


def test_changepoint_detects_level_shift():
    pattern = np.resize([200.0, 210.0, 190.0, 205.0, 195.0], 18)
    values = np.r_[pattern, pattern + 400.0]
    engine = IidChangePointDetectEngine(confidence=95.0, change_history_length=9)
    out = engine.detect(values)

    alerts = np.flatnonzero(out[:, 0])
    assert alerts.size >= 1
    assert alerts[0] >= 18


def test_changepoint_cooldown_spaces_alerts():
    values = np.r_[np.full(10, 1.0), np.full(10, 100.0), np.full(10, 1000.0)]
    engine = IidChangePointDetectEngine(confidence=90.0, change_history_length=5)
    alerts = np.flatnonzero(engine.detect(values)[:, 0])

    assert (np.diff(alerts) > engine.history_length).all()
