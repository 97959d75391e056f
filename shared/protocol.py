"""DTOs intercambiados entre el parser de entrada y el driver."""

from __future__ import annotations

from dataclasses import dataclass

from servidor.domain.models import Producto


@dataclass(slots=True)
class InventoryQuery:
    """Consultas de la ultima linea de entrada."""

    categoria: str
    nombre: str
    nombre_a_eliminar: str


@dataclass(slots=True)
class InventoryInput:
    """Resultado de parsear la entrada completa."""

    productos: list[Producto]
    query: InventoryQuery
