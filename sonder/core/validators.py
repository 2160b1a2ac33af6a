#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for sonder snapshots.

Provides type-safe conversion of the loosely typed values found in
YAML/JSON snapshots into the types the journal helpers expect.
"""
from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError


class DataValidator:
    """Centralized data validation for snapshot records."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names

        Raises:
            ValidationError: If validation fails
        """
        for field in required_fields:
            if field not in data or data[field] in (None, ""):
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize string value.

        Args:
            value: Value to normalize

        Returns:
            Stripped string, or None for missing/blank values
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_string_list(value: Any) -> List[str]:
        """
        Normalize a list of strings.

        Entries are converted to str but otherwise kept as written;
        tag casing and whitespace are meaningful to the tag helpers.

        Args:
            value: None, a single string, or a list of values

        Returns:
            List of strings (empty for None)

        Raises:
            ValidationError: If value is neither a string nor a list
        """
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        raise ValidationError(f"Expected a list of strings, got {type(value).__name__}")

    @staticmethod
    def normalize_datetime(value: Any) -> Optional[datetime]:
        """
        Normalize various timestamp inputs to an aware UTC datetime.

        Naive values are taken as UTC. Dates become midnight UTC.

        Args:
            value: ISO-8601 string, datetime, date, or epoch seconds

        Returns:
            Timezone-aware datetime in UTC, or None

        Raises:
            ValidationError: If the value cannot be parsed
        """
        if value is None or value == "":
            return None

        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, time.min)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value, tz=timezone.utc)
        elif isinstance(value, str):
            text = value.strip()
            # fromisoformat only accepts a trailing 'Z' from 3.11 onwards
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError as e:
                raise ValidationError(f"Invalid timestamp: '{value}'") from e
        else:
            raise ValidationError(
                f"Cannot convert {type(value).__name__} to timestamp"
            )

        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    @staticmethod
    def normalize_int(value: Any) -> Optional[int]:
        """
        Convert value to integer.

        Raises:
            ValidationError: If the value is not integral
        """
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            raise ValidationError(f"Cannot convert boolean '{value}' to integer")
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Cannot convert '{value}' to integer") from e
        if not number.is_integer():
            raise ValidationError(f"Cannot convert '{value}' to integer")
        return int(number)

    @staticmethod
    def normalize_float(value: Any) -> Optional[float]:
        """
        Convert value to float.

        Raises:
            ValidationError: If the value is not numeric
        """
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            raise ValidationError(f"Cannot convert boolean '{value}' to float")
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Cannot convert '{value}' to float") from e
