import json
from typing import Any


def to_json(value: Any) -> str:
    """Serialize a value compactly, the way span attributes store it."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def is_structured(value: Any) -> bool:
    """Return True for values that serialize as JSON objects/arrays/null."""
    return value is None or isinstance(value, (dict, list))
