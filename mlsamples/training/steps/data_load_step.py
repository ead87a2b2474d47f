# mlsamples/training/steps/data_load_step.py
from __future__ import annotations

from typing import Any, Callable, Sequence, Type, Union

from mlsamples import logs
from mlsamples.engines.text_loader_engine import TextLoaderEngine
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep
from mlsamples.utils.path import PathManager

RecordSource = Union[Sequence[Any], Callable[[], Sequence[Any]]]


class RecordsLoadStep(PipelineStep):
    """
    In-memory records → ctx.data[slot].

    `records` may be a callable, evaluated when the step runs.
    """

    def __init__(self, slot: str, records: RecordSource, record_type: Type, inst=None):
        super().__init__(inst)
        self.slot = slot
        self.records = records
        self.record_type = record_type
        self.engine = TextLoaderEngine()

    def run(self, ctx: TutorialContext) -> TutorialContext:
        records = self.records() if callable(self.records) else self.records

        with self.leaf(ctx, f"load_{self.slot}"):
            ctx.data[self.slot] = self.engine.load_records(records, self.record_type)

        logs.info(f"[{self.step_name}] {ctx.name}.{self.slot} rows={len(ctx.data[self.slot])}")
        return ctx


class TextFileLoadStep(PipelineStep):
    """
    Delimited text file (path relative to the working root) → ctx.data[slot].
    """

    def __init__(
        self,
        slot: str,
        path: str,
        record_type: Type,
        *,
        has_header: bool,
        separator: str,
        allow_quoting: bool = False,
        inst=None,
    ):
        super().__init__(inst)
        self.slot = slot
        self.path = path
        self.record_type = record_type
        self.has_header = has_header
        self.separator = separator
        self.allow_quoting = allow_quoting
        self.engine = TextLoaderEngine()

    def run(self, ctx: TutorialContext) -> TutorialContext:
        path = PathManager.resolve(self.path)

        with self.leaf(ctx, f"load_{self.slot}"):
            ctx.data[self.slot] = self.engine.load(
                path,
                self.record_type,
                has_header=self.has_header,
                separator=self.separator,
                allow_quoting=self.allow_quoting,
            )
        return ctx
