#!filepath: tests/vision/test_image_transform_engine.py
import numpy as np
import pytest

from mlsamples.utils.errors import SchemaError
from mlsamples.vision.image_source import read_image_folder, read_image_list
from mlsamples.vision.image_transform_engine import ImageTransformEngine


def test_transform_channels_first(tmp_path, make_image):
    path = make_image(tmp_path / "red.png", color=(255, 0, 0), size=(32, 24))

    pixels = ImageTransformEngine(8, 6).transform(path)

    assert pixels.shape == (3, 6, 8)
    assert pixels.dtype == np.float32
    np.testing.assert_allclose(pixels[0], 255.0)
    np.testing.assert_allclose(pixels[1], 0.0)


def test_transform_offset_scale_channels_last(tmp_path, make_image):
    path = make_image(tmp_path / "blue.jpg", color=(0, 0, 255), size=(10, 10))

    engine = ImageTransformEngine(4, 4, offset=117.0, scale=0.5, channels_last=True)
    pixels = engine.transform(path)

    assert pixels.shape == (4, 4, 3)
    assert pixels[0, 0, 0] == pytest.approx((0 - 117.0) * 0.5, abs=2.0)
    assert pixels[0, 0, 2] == pytest.approx((255 - 117.0) * 0.5, abs=2.0)


def test_transform_batch(tmp_path, make_image):
    paths = [make_image(tmp_path / f"{i}.png") for i in range(3)]
    assert ImageTransformEngine(5, 5).transform_batch(paths).shape == (3, 3, 5, 5)


def test_rejects_non_positive_size():
    with pytest.raises(ValueError):
        ImageTransformEngine(0, 10)


def test_read_image_folder_skips_markdown(tmp_path, make_image):
    make_image(tmp_path / "b.jpg")
    make_image(tmp_path / "a.png")
    (tmp_path / "README.md").write_text("images")

    records = read_image_folder(tmp_path)

    assert [r.label for r in records] == ["a.png", "b.jpg"]
    assert records[0].image_path == str(tmp_path / "a.png")


def test_read_image_folder_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_image_folder(tmp_path / "nope")


def test_read_image_list_joins_folder(tmp_path):
    tags = tmp_path / "tags.tsv"
    tags.write_text("broccoli.jpg\tfood\nteddy2.jpg\tteddy bear\n")

    records = read_image_list(tags, tmp_path / "images")

    assert [r.label for r in records] == ["food", "teddy bear"]
    assert records[1].image_path == str(tmp_path / "images" / "teddy2.jpg")


def test_read_image_list_file_names_only(tmp_path):
    listing = tmp_path / "image_list.tsv"
    listing.write_text("broccoli.jpg\npizza.jpg\n")

    records = read_image_list(listing, tmp_path / "images", with_labels=False)

    assert [r.image_path for r in records] == [
        str(tmp_path / "images" / "broccoli.jpg"),
        str(tmp_path / "images" / "pizza.jpg"),
    ]
    assert [r.label for r in records] == ["", ""]


def test_read_image_list_with_labels_needs_two_columns(tmp_path):
    listing = tmp_path / "image_list.tsv"
    listing.write_text("broccoli.jpg\npizza.jpg\n")

    with pytest.raises(SchemaError):
        read_image_list(listing, tmp_path / "images")
