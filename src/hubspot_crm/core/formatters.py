"""
Utility module for formatting data.
"""
from typing import Any
from datetime import datetime

from pydantic import BaseModel


def convert_datetime_fields(obj: Any) -> Any:
    """Convert models and datetime values into JSON-ready structures.

    Args:
        obj: Object potentially containing models or datetime values

    Returns:
        Object with models dumped to their HubSpot field names and datetimes as ISO strings
    """
    if isinstance(obj, BaseModel):
        return convert_datetime_fields(obj.model_dump(by_alias=True, exclude_none=True))
    if isinstance(obj, dict):
        return {k: convert_datetime_fields(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [convert_datetime_fields(item) for item in obj]
    elif isinstance(obj, datetime):
        return obj.isoformat().replace("+00:00", "Z")
    return obj
