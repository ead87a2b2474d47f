#!filepath: mlsamples/utils/path.py
from pathlib import Path
from typing import Optional

from mlsamples.utils.logger import logs


class PathManager:
    """
    工作目录结构（root 默认为当前工作目录）：

    <root>
     ├── Data/            datasets + run-scoped model artifacts
     │     └── assets/    transfer-learning images
     ├── Models/          published model artifacts
     ├── assets/          object-detection model + images
     └── logs/

    Every path in the tutorial configs is relative to root.
    """

    _root: Optional[Path] = None

    # ---------------------------------------------------------
    # root detection
    # ---------------------------------------------------------
    @classmethod
    def root(cls) -> Path:
        if cls._root is None:
            return Path.cwd()
        return cls._root

    @classmethod
    def set_root(cls, new_root: Path | str | None):
        if new_root is None:
            cls._root = None
        else:
            cls._root = Path(new_root).resolve()
        logs.debug(f"[PathManager] set_root = {cls._root}")

    # ---------------------------------------------------------
    # config-relative paths
    # ---------------------------------------------------------
    @classmethod
    def resolve(cls, relative: str | Path) -> Path:
        """
        Absolute paths pass through untouched.
        """
        p = Path(relative)
        if p.is_absolute():
            return p
        return cls.root() / p
