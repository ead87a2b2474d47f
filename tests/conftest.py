# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from loguru import logger
from PIL import Image

from mlsamples.utils.path import PathManager


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def workdir(tmp_path: Path):
    """
    Working root for one test; every configured relative path resolves here.
    """
    PathManager.set_root(tmp_path)
    yield tmp_path
    PathManager.set_root(None)


@pytest.fixture
def write_text():
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_image():
    def _make(path: Path, color=(255, 0, 0), size=(32, 24)) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color).save(path)
        return path

    return _make


# ============================================================
# fake onnxruntime sessions
# ============================================================
class FakeYoloSession:
    """
    Returns a 125x13x13 grid with exactly one confident `person` box
    centred in cell (6, 6).
    """

    def __init__(self, path, providers=None):
        self.path = path

    def run(self, output_names, feed):
        grid = np.zeros((1, 125, 13, 13), dtype=np.float32)
        grid[0, 4, 6, 6] = 5.0          # objectness of anchor 0
        grid[0, 5 + 14, 6, 6] = 10.0    # class 14 = person
        return [grid]


class FakeInceptionSession:
    """
    Features = per-channel mean of the (offset) input pixels.
    """

    def __init__(self, path, providers=None):
        self.path = path

    def run(self, output_names, feed):
        (x,) = feed.values()
        return [x.mean(axis=(1, 2)).astype(np.float32)]


@pytest.fixture
def fake_yolo_session(monkeypatch):
    import mlsamples.vision.onnx_model_scorer as scorer_module

    monkeypatch.setattr(scorer_module.ort, "InferenceSession", FakeYoloSession)
    return FakeYoloSession


@pytest.fixture
def fake_inception_session(monkeypatch):
    import mlsamples.vision.onnx_model_scorer as scorer_module

    monkeypatch.setattr(scorer_module.ort, "InferenceSession", FakeInceptionSession)
    return FakeInceptionSession


# ============================================================
# synthetic datasets
# ============================================================
POSITIVE = [
    "I love this place",
    "Great food and great service",
    "The pasta was wonderful",
    "Amazing dessert, loved it",
    "Really good and friendly staff",
    "Excellent steak, will come back",
    "Best pizza in town",
    "Wonderful atmosphere and tasty dishes",
    "I love the spaghetti here",
    "Delicious and fresh",
    "Great value, great taste",
    "The staff was lovely",
    "Fantastic meal",
    "Good portions and good prices",
    "Loved every bite",
    "Superb wine list",
    "Very good burger",
    "The soup was great",
    "Nice and tasty",
    "Perfect dinner",
]

NEGATIVE = [
    "This was a horrible meal",
    "Terrible service and bad food",
    "The steak was awful",
    "I hated the dessert",
    "Rude staff, bad experience",
    "Worst pizza ever",
    "The soup was cold and bad",
    "Never coming back, horrible",
    "Disgusting and overpriced",
    "Bad portions and bad prices",
    "Awful atmosphere",
    "The burger was terrible",
    "Very bad wine",
    "Horrible dinner",
    "Stale bread, bad taste",
    "The pasta was awful",
    "I did not like it, bad",
    "Poor quality and slow",
    "Terrible, just terrible",
    "Bad bad bad",
]


@pytest.fixture
def sentiment_file(workdir, write_text) -> Path:
    lines = [f"{t}\t1" for t in POSITIVE] + [f"{t}\t0" for t in NEGATIVE]
    return write_text(workdir / "Data" / "yelp_labelled.txt", "\n".join(lines) + "\n")


ISSUE_AREAS = {
    "area-websockets": ("WebSockets connection drops", "The websocket connection is slow and drops in SignalR"),
    "area-ef": ("Entity Framework crashes", "EF crashes when connecting to the database"),
    "area-mvc": ("MVC routing broken", "Controller routing returns 404 for mvc views"),
}


@pytest.fixture
def issue_files(workdir, write_text):
    header = "ID\tArea\tTitle\tDescription"

    def rows(offset: int, n: int):
        out = []
        k = offset
        for area, (title, desc) in ISSUE_AREAS.items():
            for i in range(n):
                out.append(f"{k}\t{area}\t{title} {i}\t{desc} case {i}")
                k += 1
        return out

    train = write_text(workdir / "Data" / "issues_train.tsv", "\n".join([header] + rows(0, 8)) + "\n")
    test = write_text(workdir / "Data" / "issues_test.tsv", "\n".join([header] + rows(100, 3)) + "\n")
    return train, test


@pytest.fixture
def taxi_files(workdir, write_text):
    rng = np.random.default_rng(0)
    header = "vendor_id,rate_code,passenger_count,trip_time,trip_distance,payment_type,fare_amount"

    def rows(n):
        out = []
        for _ in range(n):
            vendor = rng.choice(["VTS", "CMT"])
            payment = rng.choice(["CRD", "CSH"])
            distance = float(rng.uniform(0.5, 10))
            time = int(distance * 300 + rng.integers(0, 120))
            fare = 2.5 + 2.5 * distance
            out.append(f"{vendor},1,{int(rng.integers(1, 4))},{time},{distance:.2f},{payment},{fare:.2f}")
        return out

    train = write_text(workdir / "Data" / "taxi-fare-train.csv", "\n".join([header] + rows(60)) + "\n")
    test = write_text(workdir / "Data" / "taxi-fare-test.csv", "\n".join([header] + rows(20)) + "\n")
    return train, test


@pytest.fixture
def iris_file(workdir, write_text):
    rng = np.random.default_rng(1)
    centers = {
        "Iris-setosa": (5.0, 3.4, 1.5, 0.2),
        "Iris-versicolor": (5.9, 2.8, 4.3, 1.3),
        "Iris-virginica": (6.6, 3.0, 5.6, 2.0),
    }
    lines = []
    for name, c in centers.items():
        for _ in range(15):
            v = np.asarray(c) + rng.normal(0, 0.1, size=4)
            lines.append(",".join(f"{x:.1f}" for x in v) + f",{name}")
    return write_text(workdir / "Data" / "iris.data", "\n".join(lines) + "\n")


@pytest.fixture
def rating_files(workdir, write_text):
    rng = np.random.default_rng(2)
    header = "userId,movieId,rating,timestamp"

    def rows(users, movies, p):
        out = []
        for u in users:
            for m in movies:
                if rng.random() < p:
                    rating = 4.5 if (u + m) % 2 == 0 else 2.0
                    out.append(f"{u},{m},{rating},964982703")
        return out

    train_rows = rows(range(1, 11), range(1, 16), 0.7) + ["6,10,4.5,964982703"]
    test_rows = rows(range(1, 11), range(1, 16), 0.2)
    train = write_text(workdir / "Data" / "recommendation-ratings-train.csv", "\n".join([header] + train_rows) + "\n")
    test = write_text(workdir / "Data" / "recommendation-ratings-test.csv", "\n".join([header] + test_rows) + "\n")
    return train, test


SALES = [
    271.0, 150.9, 188.1, 124.3, 185.3, 173.5, 236.8, 229.5, 197.8, 127.6,
    233.5, 163.2, 193.3, 155.5, 216.3, 154.1, 200.7, 188.7, 205.6, 160.4,
    190.2, 213.4, 180.1, 198.7, 2400.0, 210.3, 198.5, 225.1, 190.8, 203.2,
    591.8, 612.4, 624.1, 598.3, 605.9, 630.2,
]


@pytest.fixture
def sales_file(workdir, write_text):
    lines = ["Month,ProductSales"] + [f"{i + 1}-Jan,{v}" for i, v in enumerate(SALES)]
    return write_text(workdir / "Data" / "product-sales.csv", "\n".join(lines) + "\n")
