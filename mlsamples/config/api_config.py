#!filepath: mlsamples/config/api_config.py
from pydantic import BaseModel


class ApiConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5000
    model_dir: str = "Models/sentiment"
    watch_for_changes: bool = True
