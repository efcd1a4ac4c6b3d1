import pytest

from electrophoresis.utils import format_elapsed


@pytest.mark.parametrize("seconds, expected", [
    (0, "00:00"),
    (9, "00:09"),
    (60, "01:00"),
    (125, "02:05"),
    (3599, "59:59"),
])
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected
