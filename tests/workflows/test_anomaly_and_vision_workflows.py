#!filepath: tests/workflows/test_anomaly_and_vision_workflows.py
from pathlib import Path

import pytest

from mlsamples.config.tutorial_config import (
    ObjectDetectionConfig,
    SalesAnomalyConfig,
    TransferLearningConfig,
)
from mlsamples.pipeline.model_artifact import META_FILE
from mlsamples.steps.anomaly_report_step import CHANGEPOINT_HEADER, SPIKE_HEADER
from mlsamples.workflows.image_transfer_learning import run_transfer_learning
from mlsamples.workflows.object_detection import run_object_detection
from mlsamples.workflows.sales_anomaly_detection import run_sales_anomaly


# ============================================================
# sales anomaly
# ============================================================
def test_sales_anomaly(sales_file, workdir, capsys):
    ctx = run_sales_anomaly(SalesAnomalyConfig(chart_file="Data/sales.png"))

    spikes = ctx.predictions["spikes"]
    changepoints = ctx.predictions["changepoints"]
    assert len(spikes) == len(changepoints) == 36
    assert all(len(p.prediction) == 3 for p in spikes)
    assert all(len(p.prediction) == 4 for p in changepoints)

    # 2400 in month 25 is the spike
    assert spikes[24].prediction[0] == 1.0
    assert spikes[0].prediction[0] == 0.0

    out = capsys.readouterr().out
    assert SPIKE_HEADER in out and CHANGEPOINT_HEADER in out
    assert len(ctx.outputs["spikes_report"]) == 38
    assert (workdir / "Data" / "sales.png").exists()


# ============================================================
# object detection
# ============================================================
@pytest.fixture
def detection_assets(workdir, make_image):
    model = workdir / "assets" / "tiny_yolov2" / "Model.onnx"
    model.parent.mkdir(parents=True)
    model.write_bytes(b"onnx")
    images = workdir / "assets" / "images"
    make_image(images / "dog2.jpg", size=(320, 240))
    make_image(images / "image1.png", color=(0, 255, 0), size=(200, 200))
    (images / "readme.md").write_text("sample images")
    return images


def test_object_detection(detection_assets, fake_yolo_session, capsys):
    ctx = run_object_detection(ObjectDetectionConfig())

    assert ctx is not None
    boxes = ctx.predictions["boxes"]
    assert len(boxes) == 2
    assert [[b.label for b in image_boxes] for image_boxes in boxes] == [["person"], ["person"]]

    drawn = ctx.outputs["drawn_images"]
    assert [Path(p).name for p in drawn] == ["dog2.jpg", "image1.png"]
    assert all(Path(p).exists() for p in drawn)

    out = capsys.readouterr().out
    assert "Detected objects in dog2.jpg:" in out
    assert "person - Confidence Score:" in out


def test_object_detection_failure_returns_none(workdir, capsys):
    assert run_object_detection(ObjectDetectionConfig()) is None
    assert "FileNotFoundError" in capsys.readouterr().out


# ============================================================
# transfer learning
# ============================================================
@pytest.fixture
def transfer_assets(workdir, make_image, write_text):
    red, blue = (255, 0, 0), (0, 0, 255)

    (workdir / "Data").mkdir(exist_ok=True)
    (workdir / "Data" / "tensorflow_inception_graph.onnx").write_bytes(b"onnx")

    train = workdir / "Data" / "assets" / "inputs-train" / "data"
    tags = []
    for i in range(4):
        make_image(train / f"red{i}.png", color=red)
        make_image(train / f"blue{i}.png", color=blue)
        tags += [f"red{i}.png\tred", f"blue{i}.png\tblue"]
    write_text(train / "tags.tsv", "\n".join(tags) + "\n")

    predict = workdir / "Data" / "assets" / "inputs-predict" / "data"
    make_image(predict / "p_red.png", color=red)
    make_image(predict / "p_blue.png", color=blue)
    write_text(predict / "image_list.tsv", "p_red.png\np_blue.png\n")

    single = workdir / "Data" / "assets" / "inputs-predict-single" / "data"
    make_image(single / "toaster3.jpg", color=red)
    return workdir


def test_transfer_learning(transfer_assets, fake_inception_session, capsys):
    ctx = run_transfer_learning(TransferLearningConfig(image_width=8, image_height=8))

    predicted = [p.predicted_label_value for p in ctx.predictions["image_list"]]
    assert predicted == ["red", "blue"]
    assert ctx.predictions["single"][0].predicted_label_value == "red"
    assert len(ctx.predictions["training_images"]) == 8
    assert len(ctx.metrics["per_class_log_loss"]) == 2

    assert (transfer_assets / "Data" / "assets" / "outputs" / "imageClassifier" / META_FILE).exists()

    out = capsys.readouterr().out
    assert "Image: toaster3.jpg predicted as: red with score:" in out
    assert "PerClassLogLoss:" in out
