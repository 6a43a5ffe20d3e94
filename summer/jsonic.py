from __future__ import annotations

import json
from typing import Any


def dumps(data: Any) -> str:
    """JSON for stdout: stable key order, UTF-8 kept readable, trailing newline."""
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


__all__ = ["dumps"]
