# mlsamples/training/engines/registry.py
from typing import Callable, Dict

from mlsamples.training.engines.model_train_engine import ModelTrainEngine
from mlsamples.training.engines.model.sdca_regression_train_engine import (
    SdcaRegressionTrainEngine,
)
from mlsamples.training.engines.model.sdca_logistic_regression_train_engine import (
    SdcaLogisticRegressionTrainEngine,
)
from mlsamples.training.engines.model.sdca_maximum_entropy_train_engine import (
    SdcaMaximumEntropyTrainEngine,
)
from mlsamples.training.engines.model.fast_tree_train_engine import (
    FastTreeTrainEngine,
)
from mlsamples.training.engines.model.kmeans_train_engine import KMeansTrainEngine
from mlsamples.training.engines.model.matrix_factorization_train_engine import (
    MatrixFactorizationTrainEngine,
)
from mlsamples.training.engines.model.lbfgs_maximum_entropy_train_engine import (
    LbfgsMaximumEntropyTrainEngine,
)

_ENGINE_REGISTRY: Dict[str, Callable[[object], ModelTrainEngine]] = {
    "sdca_regression": lambda cfg: SdcaRegressionTrainEngine(cfg),
    "sdca_logistic_regression": lambda cfg: SdcaLogisticRegressionTrainEngine(cfg),
    "sdca_maximum_entropy": lambda cfg: SdcaMaximumEntropyTrainEngine(cfg),
    "fast_tree": lambda cfg: FastTreeTrainEngine(cfg),
    "kmeans": lambda cfg: KMeansTrainEngine(cfg),
    "matrix_factorization": lambda cfg: MatrixFactorizationTrainEngine(cfg),
    "lbfgs_maximum_entropy": lambda cfg: LbfgsMaximumEntropyTrainEngine(cfg),
}


def available_trainers() -> list[str]:
    return list(_ENGINE_REGISTRY)


def resolve_model_train_engine(trainer: str, cfg) -> ModelTrainEngine:
    if trainer not in _ENGINE_REGISTRY:
        available = ", ".join(_ENGINE_REGISTRY)
        raise ValueError(
            f"No ModelTrainEngine for '{trainer}'. Available: {available}"
        )

    return _ENGINE_REGISTRY[trainer](cfg)
