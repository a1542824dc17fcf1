# app/Catalog/utils/form_utils.py
import re
from decimal import Decimal

from ..exceptions import ValidationError

TRUE_VALUES = {"true", "on", "1", "yes", "sim"}

# Numeric(10, 2): не больше 8 цифр до запятой
MAX_PRICE = Decimal("99999999.99")
PRICE_RE = re.compile(r"^[0-9]+(\.[0-9]+)?$")


def parse_price(raw: str | None) -> Decimal:
    # Цена приходит строкой, десятичный разделитель может быть запятой ("199,90")
    if raw is None or not str(raw).strip():
        raise ValidationError("Preço é obrigatório")
    value = str(raw).strip().replace(" ", "")
    if "," in value:
        value = value.replace(".", "").replace(",", ".")
    if not PRICE_RE.match(value):
        raise ValidationError(f"Preço inválido: {raw}")
    price = Decimal(value)
    if price > MAX_PRICE:
        raise ValidationError(f"Preço muito alto: {raw}")
    price = price.quantize(Decimal("0.01"))
    if price > MAX_PRICE:
        raise ValidationError(f"Preço muito alto: {raw}")
    return price


def parse_bool(raw: str | bool | None) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    return str(raw).strip().lower() in TRUE_VALUES


def require_text(raw: str | None, field: str) -> str:
    value = (raw or "").strip()
    if not value:
        raise ValidationError(f"Campo obrigatório ausente: {field}")
    return value
