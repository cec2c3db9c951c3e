import pytest

from dropkit.core.formatting import format_bytes


@pytest.mark.parametrize("size, expected", [
    (0, "0 Bytes"),
    (-5, "0 Bytes"),
    (500, "500 Bytes"),
    (1024, "1 KB"),
    (1536, "1.5 KB"),
    (1024 ** 2 * 3, "3 MB"),
    (1234567, "1.18 MB"),
])
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected


def test_format_bytes_decimals():
    assert format_bytes(1234567, decimals=0) == "1 MB"
    assert format_bytes(1234567, decimals=3) == "1.177 MB"
