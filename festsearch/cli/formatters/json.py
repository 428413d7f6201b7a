"""JSON output formatter."""

import json
from typing import Any


def format_json(data: Any, pretty: bool = True) -> str:
    """Serialize plain data for output."""
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)
