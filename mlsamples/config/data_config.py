#!filepath: mlsamples/config/data_config.py
from pydantic import BaseModel


class DataConfig(BaseModel):
    # working root; "." means the current directory
    root: str
