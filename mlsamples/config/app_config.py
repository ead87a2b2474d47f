#!filepath: mlsamples/config/app_config.py
import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv
import os

from .log_config import LogConfig
from .data_config import DataConfig
from .api_config import ApiConfig
from .tutorial_config import TutorialsConfig


def package_root() -> str:
    """
    mlsamples/config/app_config.py → mlsamples/config → mlsamples
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig
    data: DataConfig
    tutorials: TutorialsConfig = Field(default_factory=TutorialsConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 mlsamples/config/base.yml
        - .env 从当前工作目录读取
        - MLSAMPLES_ROOT 覆盖 data.root
        """
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        root = os.getenv("MLSAMPLES_ROOT")
        if root:
            raw.setdefault("data", {})
            raw["data"]["root"] = root

        return cls(**raw)
