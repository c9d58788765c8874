#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for postkit.

Provides type-safe conversion of front matter values used by the Post
dataclass and the validators.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError

# YYYY-MM-DD, optionally followed by a time part ("T10:00", " 10:00:00 +0200")
ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")


class DataValidator:
    """Centralized validation for front matter values."""

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
        for field_name in required_fields:
            value = data.get(field_name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"Required field '{field_name}' missing or empty")

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize various date inputs to a date object.

        PyYAML already turns unquoted ``2024-01-15`` into a date and
        ``2024-01-15 10:00:00`` into a datetime; quoted values arrive as
        strings and are parsed here.

        Args:
            date_value: Date string, date object, or datetime

        Returns:
            Normalized date object or None if the value is not a date
        """
        # datetime is a subclass of date, check it first
        if isinstance(date_value, datetime):
            return date_value.date()
        if isinstance(date_value, date):
            return date_value
        if isinstance(date_value, str):
            match = ISO_DATE_PATTERN.match(date_value.strip())
            if not match:
                return None
            try:
                return date(*(int(part) for part in match.groups()))
            except ValueError:
                return None
        return None

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize a scalar to a stripped string.

        Returns:
            Stripped string, or None for empty or missing values
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_bool(value: Any) -> Optional[bool]:
        """
        Convert various inputs to boolean.

        Raises:
            ValidationError: If conversion fails
        """
        if isinstance(value, bool):
            return value
        elif isinstance(value, (int, float)):
            if value == 0:
                return False
            elif value == 1:
                return True
            raise ValidationError(f"Cannot convert numeric '{value}' to boolean")
        elif isinstance(value, str):
            if value.lower() in ("true", "1", "yes", "on"):
                return True
            elif value.lower() in ("false", "0", "no", "off"):
                return False
            raise ValidationError(f"Cannot convert '{value}' to boolean")
        elif value is not None:
            return bool(value)
        return None

    @staticmethod
    def normalize_str_list(value: Any) -> List[str]:
        """
        Normalize a tag-like field to a list of strings.

        A single string becomes a one-element list; None becomes [].
        """
        if value is None:
            return []
        if isinstance(value, str):
            return [value.strip()] if value.strip() else []
        if isinstance(value, (list, tuple)):
            return [str(item).strip() for item in value if item is not None and str(item).strip()]
        raise ValidationError(f"Cannot convert {type(value).__name__} to a list of strings")
