#!filepath: tests/training/test_registry.py
import pytest

from mlsamples.config.tutorial_config import HelloMLConfig, TaxiFareConfig
from mlsamples.training.engines.model.fast_tree_train_engine import FastTreeTrainEngine
from mlsamples.training.engines.registry import (
    available_trainers,
    resolve_model_train_engine,
)


def test_available_trainers():
    assert set(available_trainers()) == {
        "sdca_regression",
        "sdca_logistic_regression",
        "sdca_maximum_entropy",
        "fast_tree",
        "kmeans",
        "matrix_factorization",
        "lbfgs_maximum_entropy",
    }


def test_resolve_known_trainer():
    engine = resolve_model_train_engine("fast_tree", TaxiFareConfig())
    assert isinstance(engine, FastTreeTrainEngine)
    assert engine.trainer == "fast_tree"
    assert engine.task == "regression"


def test_resolve_unknown_trainer_lists_available():
    with pytest.raises(ValueError) as e:
        resolve_model_train_engine("online_gradient_descent", HelloMLConfig())

    assert "online_gradient_descent" in str(e.value)
    assert "sdca_regression" in str(e.value)
