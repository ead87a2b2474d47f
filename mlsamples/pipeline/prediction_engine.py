# mlsamples/pipeline/prediction_engine.py
from __future__ import annotations

from dataclasses import asdict
from typing import Any, List, Sequence, Type

from mlsamples.core.records import record_from_row, records_to_frame


class PredictionEngine:
    """
    Record-in / record-out wrapper around a fitted model.

    The input record's own fields are visible to the output record, so a
    prediction can echo its input (e.g. sentiment_text).
    """

    def __init__(self, model: Any, train_engine: Any, output_type: Type):
        self.model = model
        self.train_engine = train_engine
        self.output_type = output_type

    def predict(self, record: Any) -> Any:
        return self.predict_batch([record])[0]

    def predict_batch(self, records: Sequence[Any]) -> List[Any]:
        if not records:
            return []

        frame = records_to_frame(records)
        outputs = self.train_engine.predict_frame(self.model, frame)

        results = []
        for record, out in zip(records, outputs.to_dict("records")):
            row = {**asdict(record), **out}
            results.append(record_from_row(self.output_type, row))
        return results
