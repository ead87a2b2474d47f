#!filepath: tests/vision/test_box_drawer.py
import pytest
from PIL import Image

from mlsamples.vision.yolo.box_drawer import BoundingBoxDrawer
from mlsamples.vision.yolo.yolo_bounding_box import BoundingBoxDimensions, YoloBoundingBox


def _box(x, y, w, h):
    return YoloBoundingBox(BoundingBoxDimensions(x, y, w, h), "dog", 0.87, "red")


def test_scale_box_to_image_size():
    drawer = BoundingBoxDrawer(416, 416)
    x, y, w, h = drawer.scale_box(_box(104, 208, 52, 104), image_width=832, image_height=208)

    assert (x, y, w, h) == pytest.approx((208, 104, 104, 52))


def test_scale_box_clips_to_model_frame():
    drawer = BoundingBoxDrawer(416, 416)
    x, y, w, h = drawer.scale_box(_box(-20, 400, 500, 100), image_width=416, image_height=416)

    assert x == 0 and y == 400
    assert w == pytest.approx(416)
    assert h == pytest.approx(16)


def test_draw_writes_same_size_copy(tmp_path, make_image):
    src = make_image(tmp_path / "in" / "dog.png", color=(255, 255, 255), size=(200, 100))

    out = BoundingBoxDrawer(416, 416).draw(src, tmp_path / "out", [_box(100, 100, 200, 200)])

    assert out == tmp_path / "out" / "dog.png"
    with Image.open(out) as img:
        assert img.size == (200, 100)
        # box outline is drawn in red somewhere along its left edge
        r, g, b = img.convert("RGB").getpixel((49, 60))
        assert r > 200 and g < 80 and b < 80
