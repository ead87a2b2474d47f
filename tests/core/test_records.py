#!filepath: tests/core/test_records.py
from dataclasses import dataclass

import pandas as pd
import pytest

from mlsamples.core.records import (
    ClusterPrediction,
    HousePrediction,
    ImagePrediction,
    IssuePrediction,
    SentimentData,
    TaxiTrip,
    frame_to_records,
    load_columns,
    parse_bool,
    record_from_row,
    records_to_frame,
)
from mlsamples.utils.errors import SchemaError


def test_load_columns_follow_field_order():
    cols = load_columns(TaxiTrip)

    assert [name for name, _, _ in cols] == [
        "vendor_id", "rate_code", "passenger_count", "trip_time",
        "trip_distance", "payment_type", "fare_amount",
    ]
    assert [pos for _, pos, _ in cols] == list(range(7))


def test_load_columns_requires_declarations():
    @dataclass
    class Bare:
        x: float = 0.0

    with pytest.raises(SchemaError):
        load_columns(Bare)


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("true", True), ("False", False), (1, True), (0.0, False), ("", False)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_parse_bool_rejects_garbage():
    with pytest.raises(ValueError):
        parse_bool("maybe")


def test_records_to_frame_and_back():
    records = [SentimentData("good", True), SentimentData("bad", False)]

    frame = records_to_frame(records)

    assert list(frame.columns) == ["sentiment_text", "label"]
    assert frame["label"].dtype == bool
    assert frame_to_records(frame, SentimentData) == records


def test_records_to_frame_empty_needs_type():
    with pytest.raises(ValueError):
        records_to_frame([])

    frame = records_to_frame([], SentimentData)
    assert list(frame.columns) == ["sentiment_text", "label"]
    assert len(frame) == 0


def test_frame_to_records_missing_column():
    with pytest.raises(SchemaError):
        frame_to_records(pd.DataFrame({"sentiment_text": ["x"]}), SentimentData)


def test_record_from_row_uses_output_column():
    assert record_from_row(HousePrediction, {"score": 2.5}).price == 2.5
    assert record_from_row(IssuePrediction, {"predicted_label": "area-mvc"}).area == "area-mvc"


def test_record_from_row_vectors_and_echo():
    p = record_from_row(
        ImagePrediction,
        {"image_path": "a.jpg", "label": "", "score": [0.2, 0.8], "predicted_label": "teddy"},
    )
    assert p.score == [0.2, 0.8]
    assert p.predicted_label_value == "teddy"

    c = record_from_row(ClusterPrediction, {"predicted_cluster_id": 2, "distances": (1.0, 0.5, 3.0)})
    assert c.predicted_cluster_id == 2
    assert c.distances == [1.0, 0.5, 3.0]
