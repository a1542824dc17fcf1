from __future__ import annotations

import re
from decimal import Decimal

import pytest

from app.Catalog.exceptions import ValidationError
from app.Catalog.utils.form_utils import parse_bool, parse_price, require_text
from app.Catalog.utils.naming import artifact_name, file_base_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("199,90", Decimal("199.90")),
        ("199.90", Decimal("199.90")),
        ("1.234,56", Decimal("1234.56")),
        ("0", Decimal("0.00")),
        (" 42 ", Decimal("42.00")),
        ("99999999,99", Decimal("99999999.99")),
    ],
)
def test_parse_price(raw: str, expected: Decimal) -> None:
    assert parse_price(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        None, "", "abc", "-1", "nan", "inf",
        "1e3", "1E20", "1_000", "+5",
        "100000000", "123456789,00", "99999999.999",
        "1" + "0" * 40,
    ],
)
def test_parse_price_rejects_invalid(raw) -> None:
    with pytest.raises(ValidationError):
        parse_price(raw)


def test_parse_bool() -> None:
    assert parse_bool("true") is True
    assert parse_bool("TRUE") is True
    assert parse_bool("on") is True
    assert parse_bool("false") is False
    assert parse_bool(None) is False
    assert parse_bool(True) is True


def test_require_text_strips_and_rejects_blank() -> None:
    assert require_text("  Chanel  ", "nome") == "Chanel"
    with pytest.raises(ValidationError):
        require_text("   ", "nome")


def test_file_base_name() -> None:
    assert file_base_name("Perfume Floral.JPG") == "perfume_floral"
    assert file_base_name("coração.png") == "coracao"
    assert file_base_name("../../etc/passwd.png") == "passwd"
    assert file_base_name("") == "imagem"


def test_artifact_name() -> None:
    assert artifact_name("abc", "foto.png", "webp") == "abc-foto.webp"
    assert re.fullmatch(r"abc-\d+-foto\.webp", artifact_name("abc", "foto.png", "webp", timestamp=True))
