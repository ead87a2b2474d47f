#!filepath: mlsamples/utils/filesystem.py
from pathlib import Path
from typing import Iterable, List, Optional

from mlsamples.utils.logger import logs


class FileSystem:
    """
    统一文件系统工具
    - 自动创建目录
    - 安全写入文件（临时文件 → rename）
    - 扫描目录
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        """
        创建目录（如果不存在）
        """
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] 创建目录: {p}")
        return p

    @staticmethod
    def require_file(path: str | Path, what: str = "file") -> Path:
        p = Path(path)
        if not p.is_file():
            raise FileNotFoundError(f"{what} not found: {p}")
        return p

    @staticmethod
    def safe_write_text(path: str | Path, text: str) -> None:
        """
        原子写入（避免部分写入导致文件损坏）
        """
        path = Path(path)
        FileSystem.ensure_dir(path.parent)

        tmp_path = path.with_suffix(path.suffix + ".tmp")
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(path)
        logs.debug(f"[FS] 原子写入完成: {path}")

    @staticmethod
    def scan_dir(
        path: str | Path,
        suffix: Optional[str] = None,
        exclude_suffixes: Iterable[str] = (),
    ) -> List[Path]:
        """
        返回目录下所有文件（可按后缀过滤）
        """
        p = Path(path)
        if not p.exists():
            return []

        excluded = set(exclude_suffixes)
        files = []
        for f in p.iterdir():
            if not f.is_file():
                continue
            if suffix is not None and f.suffix != suffix:
                continue
            if f.suffix in excluded:
                continue
            files.append(f)

        return sorted(files)
