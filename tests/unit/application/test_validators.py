from __future__ import annotations

import pytest

from pedigree.application.errors import ValidationError
from pedigree.application.validators import (
    ensure_fraction,
    ensure_non_negative,
    ensure_page,
    parse_enum,
    parse_gender,
    require_text,
)
from pedigree.domain.value_objects.breeding_pair_status import BreedingPairStatus
from pedigree.domain.value_objects.gender import Gender


def test_parse_gender_is_case_insensitive():
    assert parse_gender(" female ") is Gender.FEMALE
    assert parse_gender(Gender.MALE) is Gender.MALE


def test_parse_enum_lists_allowed_values():
    with pytest.raises(ValidationError) as exc_info:
        parse_enum(BreedingPairStatus, "ELOPED", "status")
    assert "PLANNED" in exc_info.value.details["allowed"]


def test_parse_enum_rejects_non_strings():
    with pytest.raises(ValidationError):
        parse_enum(Gender, 1, "gender")


@pytest.mark.parametrize("value", [-0.01, 1.5])
def test_ensure_fraction_rejects_out_of_range(value):
    with pytest.raises(ValidationError):
        ensure_fraction(value, "score")


def test_ensure_fraction_accepts_bounds_and_none():
    assert ensure_fraction(0.0, "score") == 0.0
    assert ensure_fraction(1.0, "score") == 1.0
    assert ensure_fraction(None, "score") is None


def test_ensure_non_negative():
    assert ensure_non_negative(0, "litter_size") == 0
    with pytest.raises(ValidationError):
        ensure_non_negative(-1, "litter_size")


@pytest.mark.parametrize("limit,offset", [(0, 0), (101, 0), (10, -1)])
def test_ensure_page_bounds(limit, offset):
    with pytest.raises(ValidationError):
        ensure_page(limit, offset)


def test_require_text_strips_and_rejects_blank():
    assert require_text("  Rex ", "name") == "Rex"
    with pytest.raises(ValidationError):
        require_text("   ", "name")
