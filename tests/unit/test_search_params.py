"""Query-string limit parsing for global search."""

import pytest

from crm.api.v1.endpoints.search import parse_limit
from crm.domain.exceptions import InvalidLimitException


@pytest.mark.parametrize(("raw", "expected"), [(None, 10), ("", 10), ("  ", 10)])
def test_absent_limit_uses_default(raw, expected) -> None:
    assert parse_limit(raw, default=10, maximum=50) == expected


@pytest.mark.parametrize(("raw", "expected"), [("1", 1), ("25", 25), ("50", 50), (" 7 ", 7)])
def test_valid_limit(raw, expected) -> None:
    assert parse_limit(raw, default=10, maximum=50) == expected


@pytest.mark.parametrize("raw", ["0", "51", "-1", "abc", "10.5", "5abc"])
def test_invalid_limit(raw) -> None:
    with pytest.raises(InvalidLimitException) as exc_info:
        parse_limit(raw, default=10, maximum=50)
    assert exc_info.value.details == {"min": 1, "max": 50}
