"""Servicio de inventario en memoria."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from servidor.domain.models import Producto
from servidor.services.inventory_utils import (
    compute_total_value,
    matches_ignore_case,
    sort_by_nombre,
)

LOGGER = logging.getLogger(__name__)


class InventoryService:
    """Mantiene productos en orden de insercion y responde consultas."""

    def __init__(self) -> None:
        self._productos: list[Producto] = []

    def __len__(self) -> int:
        return len(self._productos)

    def __iter__(self) -> Iterator[Producto]:
        return iter(self._productos)

    def add_product(self, producto: Producto) -> None:
        """Agrega un producto al final, sin deduplicar."""
        self._productos.append(producto)
        LOGGER.debug("Producto agregado: %s (%s)", producto.nombre, producto.categoria)

    def remove_product(self, producto: Producto) -> None:
        """Elimina la primera entrada que sea exactamente ``producto``."""
        for index, actual in enumerate(self._productos):
            if actual is producto:
                del self._productos[index]
                LOGGER.debug("Producto eliminado: %s", producto.nombre)
                return
        LOGGER.debug("Producto no encontrado para eliminar: %s", producto.nombre)

    def remove_products_by_name(self, nombre: str) -> list[Producto]:
        """Elimina todos los productos cuyo nombre coincide y los retorna."""
        removidos = self.search_products_by_name(nombre)
        for producto in removidos:
            self.remove_product(producto)
        LOGGER.info("Eliminados %s productos con nombre '%s'.", len(removidos), nombre)
        return removidos

    def calculate_total_value(self) -> int:
        """Retorna la suma de precio * stock del inventario."""
        return compute_total_value(self._productos)

    def get_products_by_category(self, categoria: str) -> list[Producto]:
        """Productos de la categoria (sin distinguir mayusculas), ordenados por nombre."""
        return sort_by_nombre(
            producto
            for producto in self._productos
            if matches_ignore_case(producto.categoria, categoria)
        )

    def search_products_by_name(self, nombre: str) -> list[Producto]:
        """Productos con nombre igual (sin distinguir mayusculas), ordenados por nombre."""
        return sort_by_nombre(
            producto
            for producto in self._productos
            if matches_ignore_case(producto.nombre, nombre)
        )

    def get_products_by_category_with_count(self) -> dict[str, int]:
        """Cantidad de productos por categoria, con claves en orden lexicografico."""
        counts: dict[str, int] = {}
        for producto in self._productos:
            counts[producto.categoria] = counts.get(producto.categoria, 0) + 1
        return {categoria: counts[categoria] for categoria in sorted(counts)}

    def get_all_products_by_category(self) -> dict[str, list[Producto]]:
        """Productos agrupados por categoria y ordenados por nombre."""
        grouped: dict[str, list[Producto]] = {}
        for producto in self._productos:
            grouped.setdefault(producto.categoria, []).append(producto)
        return {categoria: sort_by_nombre(grouped[categoria]) for categoria in sorted(grouped)}
