import pytest

from udpresolver.validation import is_valid_ipv4


@pytest.mark.parametrize(
    "text",
    ["8.8.8.8", "1.1.1.1", "202.191.56.66", "0.0.0.0", "255.255.255.255"],
)
def test_accepts_dotted_quads(text):
    assert is_valid_ipv4(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "259.154.1.1",
        "facebook.com",
        "123mua.com",
        "1.2.3",
        "1.2.3.4.5",
        "",
        "01.2.3.4",
        "1..2.3",
        "1.2.3.4 ",
        "-1.2.3.4",
        "1234.1.1.1",
    ],
)
def test_rejects_other_text(text):
    assert is_valid_ipv4(text) is False


def test_single_zero_octet_is_allowed_but_leading_zero_is_not():
    assert is_valid_ipv4("10.0.0.1") is True
    assert is_valid_ipv4("10.00.0.1") is False