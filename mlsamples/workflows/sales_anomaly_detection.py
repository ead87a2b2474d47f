# mlsamples/workflows/sales_anomaly_detection.py
from __future__ import annotations

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import SalesAnomalyConfig
from mlsamples.core.records import ProductSalesData
from mlsamples.engines.anomaly.iid_changepoint_detect_engine import (
    IidChangePointDetectEngine,
)
from mlsamples.engines.anomaly.iid_spike_detect_engine import IidSpikeDetectEngine
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.steps.anomaly_chart_step import AnomalyChartStep
from mlsamples.steps.anomaly_detect_step import AnomalyDetectStep
from mlsamples.steps.anomaly_report_step import (
    CHANGEPOINT_HEADER,
    CHANGEPOINT_MARK,
    SPIKE_HEADER,
    SPIKE_MARK,
    AnomalyReportStep,
)
from mlsamples.training.steps.data_load_step import TextFileLoadStep


def build_sales_anomaly_pipeline(cfg: SalesAnomalyConfig | None = None) -> TutorialPipeline:
    """
    Spike and change-point detection on monthly product sales.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.sales_anomaly
    inst = Instrumentation()

    spikes = IidSpikeDetectEngine(
        confidence=cfg.confidence,
        pvalue_history_length=cfg.pvalue_history_length,
    )
    changepoints = IidChangePointDetectEngine(
        confidence=cfg.confidence,
        change_history_length=cfg.change_history_length,
        martingale_epsilon=cfg.martingale_epsilon,
    )

    return TutorialPipeline(
        name="sales_anomaly",
        steps=[
            TextFileLoadStep(
                "sales",
                cfg.data_file,
                ProductSalesData,
                has_header=cfg.has_header,
                separator=cfg.separator,
                inst=inst,
            ),
            AnomalyDetectStep("spikes", spikes, slot="sales", column="num_sales", inst=inst),
            AnomalyReportStep("spikes", header=SPIKE_HEADER, mark=SPIKE_MARK, inst=inst),
            AnomalyDetectStep("changepoints", changepoints, slot="sales", column="num_sales", inst=inst),
            AnomalyReportStep("changepoints", header=CHANGEPOINT_HEADER, mark=CHANGEPOINT_MARK, inst=inst),
            AnomalyChartStep(
                cfg.chart_file,
                slot="sales",
                column="num_sales",
                label_column="month",
                inst=inst,
            ),
        ],
        cfg=cfg,
        inst=inst,
    )


def run_sales_anomaly(cfg: SalesAnomalyConfig | None = None):
    return build_sales_anomaly_pipeline(cfg).run()
