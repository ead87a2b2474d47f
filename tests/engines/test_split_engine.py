#!filepath: tests/engines/test_split_engine.py
import pandas as pd
import pytest

from mlsamples.engines.split_engine import TrainTestSplitEngine


@pytest.fixture
def frame():
    return pd.DataFrame({"x": range(100), "y": range(100, 200)})


def test_split_sizes_and_disjoint(frame):
    train, test = TrainTestSplitEngine().split(frame, test_fraction=0.2, seed=0)

    assert len(train) == 80
    assert len(test) == 20
    assert set(train["x"]).isdisjoint(test["x"])
    assert set(train["x"]) | set(test["x"]) == set(range(100))


def test_split_is_deterministic_for_seed(frame):
    engine = TrainTestSplitEngine()
    a_train, a_test = engine.split(frame, test_fraction=0.2, seed=42)
    b_train, b_test = engine.split(frame, test_fraction=0.2, seed=42)

    pd.testing.assert_frame_equal(a_train, b_train)
    pd.testing.assert_frame_equal(a_test, b_test)


def test_split_resets_index(frame):
    train, test = TrainTestSplitEngine().split(frame, test_fraction=0.3, seed=1)
    assert list(test.index) == list(range(len(test)))


@pytest.mark.parametrize("fraction", [0.0, 1.0, -0.1, 1.5])
def test_split_rejects_bad_fraction(frame, fraction):
    with pytest.raises(ValueError):
        TrainTestSplitEngine().split(frame, test_fraction=fraction)


def test_split_needs_two_rows():
    with pytest.raises(ValueError):
        TrainTestSplitEngine().split(pd.DataFrame({"x": [1]}), test_fraction=0.5)
