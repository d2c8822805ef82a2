"""Small utility functions."""

import json
import sys
from typing import Any


def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling numpy types and dataclasses."""
    def serialize_item(item):
        if hasattr(item, 'item'):  # numpy scalar
            return item.item()
        elif hasattr(item, 'tolist'):  # numpy array
            return item.tolist()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except Exception as e:
        return f"<serialization error: {e}>"


class ConsoleLogger:
    """Logger writing ``LEVEL: msg k=v`` lines to stderr."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stderr

    def _write(self, level: str, msg: str, kv: dict):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=self.stream)

    def info(self, msg: str, **kv):
        self._write("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._write("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._write("ERROR", msg, kv)
