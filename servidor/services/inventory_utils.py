"""Utilidades de comparacion y orden para productos de inventario."""

from __future__ import annotations

from collections.abc import Iterable

from parametros import CURRENCY_SYMBOL
from servidor.domain.models import Producto


def normalize_lookup_key(text: str) -> str:
    """Normaliza texto caracter a caracter para comparar sin mayusculas.

    Cada caracter pasa a mayuscula y luego a minuscula; si una conversion
    produce mas de un caracter se conserva el caracter previo, asi el largo
    del texto no cambia (``"Straße"`` no coincide con ``"STRASSE"``).
    """
    return "".join(_fold_char(char) for char in text)


def _fold_char(char: str) -> str:
    upper = char.upper()
    if len(upper) != 1:
        upper = char
    lower = upper.lower()
    return lower if len(lower) == 1 else upper


def matches_ignore_case(left: str, right: str) -> bool:
    """Compara dos textos ignorando mayusculas/minusculas."""
    return normalize_lookup_key(left) == normalize_lookup_key(right)


def sort_by_nombre(productos: Iterable[Producto]) -> list[Producto]:
    """Ordena productos por nombre ignorando mayusculas, de forma estable."""
    return sorted(productos, key=lambda producto: normalize_lookup_key(producto.nombre))


def compute_total_value(productos: Iterable[Producto]) -> int:
    """Suma precio * stock de todos los productos."""
    return sum(producto.valor_total() for producto in productos)


def format_currency(amount: int) -> str:
    """Formatea un monto entero con simbolo de moneda y sin separadores."""
    return f"{CURRENCY_SYMBOL}{amount}"
