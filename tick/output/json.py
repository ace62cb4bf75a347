"""
JsonRenderer -- Render command data as JSON for piping

Supports:
- Pretty-printed JSON output
- Compact mode for piping
- Clean data (strips internal keys)
"""

import json
from datetime import date
from enum import Enum
from typing import Any, Optional


class JsonRenderer:
    """
    Render data as JSON.

    Useful for piping to jq or feeding other tools.
    """

    def __init__(self, compact: bool = False):
        """
        Args:
            compact: If True, output single line (no indentation)
        """
        self.compact = compact

    def render(self, data: Any, title: Optional[str] = None) -> str:
        """
        Render data as JSON, wrapped with a title when one is given.
        """
        data = self._clean_data(data)
        output = {"title": title, "data": data} if title else data

        if self.compact:
            return json.dumps(output, default=self._json_serializer, ensure_ascii=False)
        return json.dumps(
            output,
            indent=2,
            default=self._json_serializer,
            ensure_ascii=False
        )

    def _clean_data(self, data: Any) -> Any:
        """Remove internal keys (starting with _)."""
        if isinstance(data, dict):
            return {
                k: self._clean_data(v)
                for k, v in data.items()
                if not str(k).startswith("_")
            }
        elif isinstance(data, list):
            return [self._clean_data(item) for item in data]
        return data

    def _json_serializer(self, obj: Any) -> Any:
        """Serializer for non-standard types."""
        if isinstance(obj, date):
            return obj.isoformat()
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if isinstance(obj, Enum):
            return obj.value
        if hasattr(obj, "__dict__"):
            return {
                k: v for k, v in obj.__dict__.items()
                if not k.startswith("_")
            }
        return str(obj)
