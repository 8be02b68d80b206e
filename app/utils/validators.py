"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation and identifier helpers for catalog input.

This module implements:
- ProductValidator: Validates and normalizes product payloads
- IdGenerator: Generates collision-free product identifiers

Validation Rules for Products:
-----------------------------
- name: present, non-blank after trimming
- description: present, non-blank after trimming
- price: number (or numeric string), finite, greater than zero
- category: present, non-blank, one of the catalog categories
- imageUrl: present, non-blank, a well-formed absolute URL

Every rule is checked; all violations are reported together.

==============================================================================
"""

from __future__ import annotations

import math
import uuid
from typing import Any, Collection, Dict, List, Mapping, Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from app.catalog.models import ProductCategory


class ProductValidator:
    """
    Validator for product create/update payloads.

    Payloads use the wire field names (name, description, price, category,
    imageUrl). Updates are full replacements, so the same rules apply to
    both operations.

    Example:
        >>> validator = ProductValidator()
        >>> validator.validate({"name": "", "price": 0})[:2]
        ['Product name is required', 'Product description is required']
    """

    NAME_REQUIRED = "Product name is required"
    DESCRIPTION_REQUIRED = "Product description is required"
    PRICE_INVALID = "Valid price is required"
    CATEGORY_REQUIRED = "Product category is required"
    CATEGORY_INVALID = "Invalid category. Must be one of: " + ", ".join(ProductCategory.values())
    IMAGE_URL_REQUIRED = "Product image URL is required"
    IMAGE_URL_INVALID = "Invalid image URL format"

    _url_adapter = TypeAdapter(AnyUrl)

    def validate(self, data: Mapping[str, Any]) -> List[str]:
        """
        Validate a product payload.

        Args:
            data: Raw payload mapping

        Returns:
            Ordered list of error messages (empty when valid)
        """
        errors = []

        if self._clean_text(data.get("name")) is None:
            errors.append(self.NAME_REQUIRED)

        if self._clean_text(data.get("description")) is None:
            errors.append(self.DESCRIPTION_REQUIRED)

        if self.parse_price(data.get("price")) is None:
            errors.append(self.PRICE_INVALID)

        category = self._clean_text(data.get("category"))
        if category is None:
            errors.append(self.CATEGORY_REQUIRED)
        elif category not in ProductCategory.values():
            errors.append(self.CATEGORY_INVALID)

        image_url = self._clean_text(data.get("imageUrl"))
        if image_url is None:
            errors.append(self.IMAGE_URL_REQUIRED)
        elif not self.is_valid_url(image_url):
            errors.append(self.IMAGE_URL_INVALID)

        return errors

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        """Quick validation check."""
        return not self.validate(data)

    def clean(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Normalize a payload that already passed validate().

        Returns:
            Mutable product fields with trimmed strings and a float price
        """
        return {
            "name": self._clean_text(data["name"]),
            "description": self._clean_text(data["description"]),
            "price": self.parse_price(data["price"]),
            "category": ProductCategory(self._clean_text(data["category"])),
            "image_url": self._clean_text(data["imageUrl"]),
        }

    # =========================================================================
    # FIELD HELPERS
    # =========================================================================

    @staticmethod
    def _clean_text(value: Any) -> Optional[str]:
        """Trimmed string, or None when missing, blank or not a string."""
        if not isinstance(value, str):
            return None
        value = value.strip()
        return value or None

    @staticmethod
    def parse_price(value: Any) -> Optional[float]:
        """
        Parse a price value.

        Accepts ints, floats and numeric strings. Booleans are rejected.

        Returns:
            Price as float, or None if missing, non-numeric, non-finite or <= 0
        """
        if value is None or isinstance(value, bool):
            return None

        try:
            if isinstance(value, (int, float)):
                price = float(value)
            elif isinstance(value, str):
                price = float(value.strip())
            else:
                return None
        except (ValueError, OverflowError):
            return None

        if not math.isfinite(price) or price <= 0:
            return None

        return price

    @classmethod
    def is_valid_url(cls, value: str) -> bool:
        """Check that value parses as an absolute URL."""
        try:
            cls._url_adapter.validate_python(value)
        except ValidationError:
            return False
        return True


class IdGenerator:
    """
    Generator for opaque product identifiers.

    Uses 128-bit random UUIDs rendered as 32 hex characters.
    """

    def generate(self, existing: Collection[str] = ()) -> str:
        """
        Generate an identifier not present in existing.

        Args:
            existing: Identifiers already in use

        Returns:
            New identifier
        """
        while True:
            candidate = uuid.uuid4().hex
            if candidate not in existing:
                return candidate
