"""
==============================================================================
Validator Tests
==============================================================================

Tests for product payload validation and identifier generation.

==============================================================================
"""

import math
import uuid

import pytest

from app.catalog.models import ProductCategory
from app.utils import validators
from app.utils.validators import IdGenerator, ProductValidator


@pytest.fixture
def validator() -> ProductValidator:
    return ProductValidator()


class TestProductValidator:
    """Tests for ProductValidator rules."""

    def test_valid_payload(self, validator, tee_payload):
        """Test a complete payload has no errors."""
        assert validator.validate(tee_payload) == []
        assert validator.is_valid(tee_payload)

    def test_empty_payload_reports_every_rule(self, validator):
        """Test missing fields each produce their own message."""
        assert validator.validate({}) == [
            ProductValidator.NAME_REQUIRED,
            ProductValidator.DESCRIPTION_REQUIRED,
            ProductValidator.PRICE_INVALID,
            ProductValidator.CATEGORY_REQUIRED,
            ProductValidator.IMAGE_URL_REQUIRED,
        ]

    def test_blank_name(self, validator, make_payload):
        """Test whitespace-only name is rejected."""
        assert validator.validate(make_payload(name="   ")) == ["Product name is required"]

    def test_blank_description(self, validator, make_payload):
        """Test empty description is rejected."""
        assert validator.validate(make_payload(description="")) == [
            ProductValidator.DESCRIPTION_REQUIRED
        ]

    def test_non_string_name(self, validator, make_payload):
        """Test non-string name is treated as missing."""
        assert validator.validate(make_payload(name=42)) == [ProductValidator.NAME_REQUIRED]

    @pytest.mark.parametrize("price", [0, -1, -0.01, "abc", "", None, True, "nan", math.inf, [1]])
    def test_invalid_price(self, validator, make_payload, price):
        """Test absent, non-numeric, non-finite, zero and negative prices fail."""
        assert validator.validate(make_payload(price=price)) == [ProductValidator.PRICE_INVALID]

    @pytest.mark.parametrize("price, expected", [(10, 10.0), (0.5, 0.5), ("19.90", 19.9), (" 7 ", 7.0)])
    def test_valid_price(self, validator, make_payload, price, expected):
        """Test numbers and numeric strings are accepted."""
        payload = make_payload(price=price)
        assert validator.validate(payload) == []
        assert validator.clean(payload)["price"] == expected

    def test_unknown_category(self, validator, make_payload):
        """Test category outside the enumeration is rejected."""
        errors = validator.validate(make_payload(category="SHOES2"))
        assert errors == [
            "Invalid category. Must be one of: READY TO WEAR, NEW COLLECTION, SHOES"
        ]

    def test_category_is_case_sensitive(self, validator, make_payload):
        """Test lowercase category name is not a member."""
        assert validator.validate(make_payload(category="shoes")) == [
            ProductValidator.CATEGORY_INVALID
        ]

    def test_padded_category_accepted(self, validator, make_payload):
        """Test surrounding whitespace is ignored for category membership."""
        payload = make_payload(category=" SHOES ")
        assert validator.validate(payload) == []
        assert validator.clean(payload)["category"] is ProductCategory.SHOES

    def test_blank_category_only_reports_required(self, validator, make_payload):
        """Test blank category yields a single message."""
        assert validator.validate(make_payload(category="  ")) == [
            ProductValidator.CATEGORY_REQUIRED
        ]

    @pytest.mark.parametrize("category", ProductCategory.values())
    def test_every_category_accepted(self, validator, make_payload, category):
        """Test all enumerated categories pass."""
        assert validator.validate(make_payload(category=category)) == []

    def test_malformed_image_url(self, validator, make_payload):
        """Test relative or garbage URLs are rejected."""
        assert validator.validate(make_payload(imageUrl="not-a-url")) == [
            ProductValidator.IMAGE_URL_INVALID
        ]

    def test_blank_image_url(self, validator, make_payload):
        """Test empty URL yields only the required message."""
        assert validator.validate(make_payload(imageUrl="")) == [
            ProductValidator.IMAGE_URL_REQUIRED
        ]

    def test_errors_accumulate(self, validator):
        """Test four invalid fields report four errors together."""
        errors = validator.validate({
            "name": "",
            "description": "Cotton tee",
            "price": 0,
            "category": "SHOES2",
            "imageUrl": "not-a-url",
        })
        assert errors == [
            ProductValidator.NAME_REQUIRED,
            ProductValidator.PRICE_INVALID,
            ProductValidator.CATEGORY_INVALID,
            ProductValidator.IMAGE_URL_INVALID,
        ]

    def test_clean_trims_fields(self, validator):
        """Test clean() trims strings and converts category."""
        cleaned = validator.clean({
            "name": "  Tee ",
            "description": " Cotton tee ",
            "price": "29.99",
            "category": " SHOES ",
            "imageUrl": " https://example.com/a.jpg ",
        })
        assert cleaned == {
            "name": "Tee",
            "description": "Cotton tee",
            "price": 29.99,
            "category": ProductCategory.SHOES,
            "image_url": "https://example.com/a.jpg",
        }


class TestIdGenerator:
    """Tests for product identifier generation."""

    def test_ids_are_unique(self):
        """Test generated ids do not repeat."""
        generator = IdGenerator()
        ids = {generator.generate() for _ in range(500)}
        assert len(ids) == 500

    def test_skips_existing_ids(self, monkeypatch):
        """Test a colliding candidate is regenerated."""
        taken = uuid.UUID(int=1)
        fresh = uuid.UUID(int=2)
        candidates = iter([taken, fresh])
        monkeypatch.setattr(validators.uuid, "uuid4", lambda: next(candidates))

        assert IdGenerator().generate({taken.hex}) == fresh.hex
