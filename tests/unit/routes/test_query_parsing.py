import pytest

from src.api.routes.user import parse_bool, parse_csv, parse_order, parse_positive_int
from src.domain.entities import SortOrder


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, []),
        ("", []),
        ("OWNER", ["OWNER"]),
        ("OWNER,,MEMBER,", ["OWNER", "MEMBER"]),
        (" Alpha , Beta ", ["Alpha", "Beta"]),
    ],
)
def test_parse_csv(value, expected):
    assert parse_csv(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [("true", True), ("false", False), ("yes", None), ("TRUE", None), (None, None)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [(None, 10), ("abc", 10), ("0", 10), ("-3", 10), ("25", 25), ("1000", 100)],
)
def test_parse_positive_int(value, expected):
    assert parse_positive_int(value, 10, maximum=100) == expected


def test_parse_order():
    assert parse_order("desc") == SortOrder.desc
    assert parse_order("asc") == SortOrder.asc
    assert parse_order("sideways") == SortOrder.asc
