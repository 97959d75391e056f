"""Formateo puro de las lineas del reporte de inventario."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from servidor.domain.models import Producto
from servidor.services.inventory_utils import format_currency


def format_product_category_line(producto: Producto) -> str:
    """Linea ``Product Name:<nombre> Category:<categoria>``."""
    return f"Product Name:{producto.nombre} Category:{producto.categoria}"


def format_product_price_line(producto: Producto) -> str:
    """Linea ``Product Name:<nombre> Price:<precio>``."""
    return f"Product Name:{producto.nombre} Price:{producto.precio}"


def format_listing(header: str, productos: Iterable[Producto]) -> list[str]:
    """Encabezado ``<header>:`` seguido de una linea por producto."""
    lines = [f"{header}:"]
    lines.extend(format_product_category_line(producto) for producto in productos)
    return lines


def format_total_value(total: int) -> str:
    return f"Total Value:{format_currency(total)}"


def format_new_total_value(total: int) -> str:
    return f"New Total Value:{format_currency(total)}"


def format_category_counts(counts: Mapping[str, int]) -> list[str]:
    """Una linea ``<categoria>:<cantidad>`` por categoria, en el orden recibido."""
    return [f"{categoria}:{count}" for categoria, count in counts.items()]


def format_grouped_products(grouped: Mapping[str, Sequence[Producto]]) -> list[str]:
    """Bloques ``<categoria>:`` con las lineas de precio de sus productos."""
    lines: list[str] = []
    for categoria, productos in grouped.items():
        lines.append(f"{categoria}:")
        lines.extend(format_product_price_line(producto) for producto in productos)
    return lines
