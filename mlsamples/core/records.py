# mlsamples/core/records.py
"""
Dataset records (FINAL)

Input records declare the position of each field in the source file
via `load_column(...)`. Prediction records declare which model output
column fills each field via `output_column(...)`; fields without one are
filled from the column carrying their own name.

Supported field types: str, float, int, bool, List[float].
"""
from __future__ import annotations

import math
import typing
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Type

import numpy as np
import pandas as pd

from mlsamples.utils.errors import SchemaError


_TRUE = {"1", "true", "t", "yes", "y"}
_FALSE = {"0", "false", "f", "no", "n", ""}


# ----------------------------------------------------------------------
# field declarations
# ----------------------------------------------------------------------
def load_column(index: int, default: Any = None):
    return field(default=default, metadata={"load_column": index})


def output_column(name: str, default: Any = None):
    return field(default=default, metadata={"column": name})


def vector_field():
    return field(default_factory=list)


# ----------------------------------------------------------------------
# input records
# ----------------------------------------------------------------------
@dataclass
class HouseData:
    size: float = load_column(0, 0.0)
    price: float = load_column(1, 0.0)


@dataclass
class SentimentData:
    sentiment_text: str = load_column(0, "")
    label: bool = load_column(1, False)


@dataclass
class GitHubIssue:
    id: str = load_column(0, "")
    area: str = load_column(1, "")
    title: str = load_column(2, "")
    description: str = load_column(3, "")


@dataclass
class TaxiTrip:
    vendor_id: str = load_column(0, "")
    rate_code: str = load_column(1, "")
    passenger_count: float = load_column(2, 0.0)
    trip_time: float = load_column(3, 0.0)
    trip_distance: float = load_column(4, 0.0)
    payment_type: str = load_column(5, "")
    fare_amount: float = load_column(6, 0.0)


@dataclass
class IrisData:
    sepal_length: float = load_column(0, 0.0)
    sepal_width: float = load_column(1, 0.0)
    petal_length: float = load_column(2, 0.0)
    petal_width: float = load_column(3, 0.0)


@dataclass
class MovieRating:
    user_id: float = load_column(0, 0.0)
    movie_id: float = load_column(1, 0.0)
    label: float = load_column(2, 0.0)


@dataclass
class ProductSalesData:
    month: str = load_column(0, "")
    num_sales: float = load_column(1, 0.0)


@dataclass
class ImageNetData:
    image_path: str = load_column(0, "")
    label: str = load_column(1, "")


@dataclass
class ImageData:
    image_path: str = load_column(0, "")
    label: str = load_column(1, "")


@dataclass
class ImageFile:
    image_path: str = load_column(0, "")


@dataclass
class GameResult:
    winner: int = load_column(0, 0)
    loser: int = load_column(1, 0)


# ----------------------------------------------------------------------
# prediction records
# ----------------------------------------------------------------------
@dataclass
class HousePrediction:
    price: float = output_column("score", 0.0)


@dataclass
class SentimentPrediction:
    sentiment_text: str = ""
    prediction: bool = False
    probability: float = 0.0
    score: float = 0.0


@dataclass
class IssuePrediction:
    area: str = output_column("predicted_label", "")


@dataclass
class TaxiTripFarePrediction:
    fare_amount: float = output_column("score", 0.0)


@dataclass
class ClusterPrediction:
    predicted_cluster_id: int = 0
    distances: List[float] = vector_field()


@dataclass
class MovieRatingPrediction:
    label: float = 0.0
    score: float = 0.0


@dataclass
class ProductSalesPrediction:
    # [alert, raw score, p-value] or [alert, raw score, p-value, martingale]
    prediction: List[float] = vector_field()


@dataclass
class PlayerSkill:
    player: int = 0
    mean: float = 0.0
    variance: float = 0.0


@dataclass
class ImagePrediction:
    image_path: str = ""
    label: str = ""
    score: List[float] = vector_field()
    predicted_label_value: str = output_column("predicted_label", "")


# ----------------------------------------------------------------------
# coercion
# ----------------------------------------------------------------------
def parse_bool(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, float, np.integer, np.floating)):
        if isinstance(value, (float, np.floating)) and math.isnan(value):
            return False
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"cannot interpret {value!r} as a boolean")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (float, np.floating)) and math.isnan(value):
        return True
    return False


def _is_vector(tp: Any) -> bool:
    return typing.get_origin(tp) in (list, List)


def coerce_value(value: Any, tp: Any) -> Any:
    if _is_vector(tp):
        if _is_missing(value):
            return []
        return [float(v) for v in np.asarray(value, dtype=float).ravel()]
    if tp is bool:
        return parse_bool(value)
    if tp is str:
        return "" if _is_missing(value) else str(value)
    if tp is int:
        return int(value)
    if tp is float:
        return float("nan") if _is_missing(value) else float(value)
    return value


def coerce_series(series: pd.Series, tp: Any) -> pd.Series:
    if tp is bool:
        return series.map(parse_bool).astype(bool)
    if tp is str:
        return series.fillna("").astype(str)
    if tp is float:
        return pd.to_numeric(series, errors="coerce").astype(float)
    if tp is int:
        return pd.to_numeric(series, errors="raise").astype(int)
    return series


# ----------------------------------------------------------------------
# schema helpers
# ----------------------------------------------------------------------
def _require_record_type(record_type: Type) -> None:
    if not is_dataclass(record_type):
        raise TypeError(f"{record_type!r} is not a record type")


def field_types(record_type: Type) -> Dict[str, Any]:
    _require_record_type(record_type)
    hints = typing.get_type_hints(record_type)
    return {f.name: hints[f.name] for f in fields(record_type)}


def field_names(record_type: Type) -> List[str]:
    _require_record_type(record_type)
    return [f.name for f in fields(record_type)]


def load_columns(record_type: Type) -> List[Tuple[str, int, Any]]:
    """
    (field, position, type) for every field declaring a load column,
    in field order.
    """
    types = field_types(record_type)
    out = []
    for f in fields(record_type):
        if "load_column" in f.metadata:
            out.append((f.name, int(f.metadata["load_column"]), types[f.name]))
    if not out:
        raise SchemaError(f"{record_type.__name__} declares no load columns")
    return out


def records_to_frame(
    records: Sequence[Any],
    record_type: Type | None = None,
) -> pd.DataFrame:
    """
    One column per field, in field order. An empty sequence needs
    `record_type` to know its columns.
    """
    if record_type is None:
        if not records:
            raise ValueError("record_type is required for an empty record list")
        record_type = type(records[0])

    names = field_names(record_type)
    rows = [[getattr(r, name) for name in names] for r in records]
    frame = pd.DataFrame(rows, columns=names)

    types = field_types(record_type)
    for name in names:
        if not _is_vector(types[name]):
            frame[name] = coerce_series(frame[name], types[name])
    return frame


def frame_to_records(frame: pd.DataFrame, record_type: Type) -> List[Any]:
    types = field_types(record_type)
    missing = [name for name in types if name not in frame.columns]
    if missing:
        raise SchemaError(
            f"{record_type.__name__}: frame lacks columns {missing}"
        )

    out = []
    for row in frame[list(types)].to_dict("records"):
        out.append(
            record_type(**{k: coerce_value(v, types[k]) for k, v in row.items()})
        )
    return out


def record_from_row(record_type: Type, row: Mapping[str, Any]) -> Any:
    """
    Build a prediction record from one row of model output.
    """
    types = field_types(record_type)
    values = {}
    for f in fields(record_type):
        source = f.metadata.get("column", f.name)
        if source in row:
            values[f.name] = coerce_value(row[source], types[f.name])
        elif f.name in row:
            values[f.name] = coerce_value(row[f.name], types[f.name])
    return record_type(**values)
