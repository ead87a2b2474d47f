from __future__ import annotations

from functools import wraps
from flask import jsonify
from typing import Callable, Any

from mlsamples import logs
from mlsamples.utils.errors import ModelArtifactError


def handle_model_not_ready(func: Callable[..., Any]):
    """
    Decorator: convert a missing / incomplete model artifact into HTTP 503.

    Contract:
    - Only catches ModelArtifactError
    - Returns JSON {error, detail}
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ModelArtifactError as e:
            logs.warning(f"[api] model not ready: {e}")
            return jsonify({
                "error": "model not available",
                "detail": str(e),
            }), 503

    return wrapper
