"""
test_date_utils.py — Unit Tests for safe_timestamp(), safe_number(), safe_count()

Tests the centralized coercion helpers used by the sort selector,
the statistics aggregator and the item builders.

Covers: ISO strings, datetime/date objects, None, "", bool, garbage strings.
"""
import math
from datetime import date, datetime, timezone, timedelta

from discovery.core.utils.date_utils import safe_timestamp, safe_number, safe_count


# ===================================================================
# 1. safe_timestamp — VALID INPUTS
# ===================================================================

def test_safe_timestamp_date_only_is_utc_midnight():
    expected = datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp()
    assert safe_timestamp("2024-01-01") == expected


def test_safe_timestamp_z_suffix():
    expected = datetime(2023, 5, 10, 12, 0, tzinfo=timezone.utc).timestamp()
    assert safe_timestamp("2023-05-10T12:00:00Z") == expected


def test_safe_timestamp_offset():
    """+02:00 is two hours earlier in UTC."""
    a = safe_timestamp("2024-01-01T12:00:00+02:00")
    b = safe_timestamp("2024-01-01T10:00:00Z")
    assert a == b


def test_safe_timestamp_datetime_and_date_objects():
    aware = datetime(2024, 2, 1, tzinfo=timezone(timedelta(hours=0)))
    assert safe_timestamp(aware) == aware.timestamp()
    assert safe_timestamp(date(2024, 2, 1)) == aware.timestamp()


def test_safe_timestamp_orders_chronologically():
    assert safe_timestamp("2024-02-01") > safe_timestamp("2024-01-01")


# ===================================================================
# 2. safe_timestamp — CORRUPT INPUTS
# ===================================================================

def test_safe_timestamp_none():
    assert safe_timestamp(None) is None


def test_safe_timestamp_empty_string():
    assert safe_timestamp("") is None
    assert safe_timestamp("   ") is None


def test_safe_timestamp_invalid_string():
    assert safe_timestamp("not a date") is None


def test_safe_timestamp_bool():
    assert safe_timestamp(True) is None


def test_safe_timestamp_list():
    assert safe_timestamp([]) is None


# ===================================================================
# 3. safe_number
# ===================================================================

def test_safe_number_int_and_string():
    assert safe_number(5) == 5.0
    assert safe_number("7.5") == 7.5


def test_safe_number_rejects_bool():
    """bool is subclass of int — True would be 1 without guard."""
    assert safe_number(True) is None
    assert safe_number(False) is None


def test_safe_number_rejects_garbage():
    assert safe_number(None) is None
    assert safe_number("five") is None
    assert safe_number({}) is None


def test_safe_number_rejects_nan():
    assert safe_number(float("nan")) is None
    assert safe_number("nan") is None


# ===================================================================
# 4. safe_count
# ===================================================================

def test_safe_count_valid():
    assert safe_count(12) == 12
    assert safe_count("3") == 3


def test_safe_count_missing_is_zero():
    assert safe_count(None) == 0
    assert safe_count("") == 0


def test_safe_count_negative_and_infinite_are_zero():
    assert safe_count(-4) == 0
    assert safe_count(math.inf) == 0


def test_safe_number_huge_int_is_missing():
    assert safe_number(10 ** 400) is None
    assert safe_count(10 ** 400) == 0
