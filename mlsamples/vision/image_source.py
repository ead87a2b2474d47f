# mlsamples/vision/image_source.py
from __future__ import annotations

from pathlib import Path
from typing import List

from mlsamples.core.records import ImageData, ImageFile, ImageNetData, frame_to_records
from mlsamples.engines.text_loader_engine import TextLoaderEngine
from mlsamples.utils.filesystem import FileSystem


def read_image_folder(folder: str | Path) -> List[ImageNetData]:
    """
    Every file in `folder` except `.md`, sorted by name. label = file name.
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise FileNotFoundError(f"image folder not found: {folder}")

    return [
        ImageNetData(image_path=str(p), label=p.name)
        for p in FileSystem.scan_dir(folder, exclude_suffixes=(".md",))
    ]


def read_image_list(
    tsv: str | Path,
    folder: str | Path,
    *,
    with_labels: bool = True,
) -> List[ImageData]:
    """
    `<file name>\\t<label>` rows; image_path is joined onto `folder`.

    With `with_labels=False` only the first column is read and label stays "",
    so a plain list of file names is enough.
    """
    loader = TextLoaderEngine()
    if with_labels:
        frame = loader.load(tsv, ImageData, has_header=False, separator="\t")
        records = frame_to_records(frame, ImageData)
    else:
        frame = loader.load(tsv, ImageFile, has_header=False, separator="\t")
        records = [ImageData(image_path=f.image_path) for f in frame_to_records(frame, ImageFile)]

    for r in records:
        r.image_path = str(Path(folder) / r.image_path)
    return records
