"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class Producto:
    """Representa un producto en inventario.

    La igualdad es por identidad: dos productos con los mismos campos son
    entradas distintas del inventario.
    """

    nombre: str
    categoria: str
    stock: int
    precio: int

    def valor_total(self) -> int:
        """Retorna precio * stock."""
        return self.precio * self.stock
