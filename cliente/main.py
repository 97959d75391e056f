"""Punto de entrada del reporte de inventario por linea de comandos."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from cliente.backend.input_parser import parse_inventory_input, read_input_text
from cliente.backend.report_formatter import (
    format_category_counts,
    format_grouped_products,
    format_listing,
    format_new_total_value,
    format_total_value,
)
from parametros import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVELS
from servidor.services.inventory import InventoryService
from shared.errors import ServiceError, ValidationError
from shared.protocol import InventoryInput

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI."""
    parser = argparse.ArgumentParser(
        description=(
            "Carga productos en un inventario en memoria, ejecuta consultas "
            "y elimina los productos indicados."
        )
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Archivo de entrada. Si se omite se lee desde stdin.",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Nivel de logging (se escribe en stderr).",
    )
    return parser.parse_args(argv)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configura logging para salida en stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_inventory(inventory_input: InventoryInput) -> InventoryService:
    """Crea el inventario con los productos parseados."""
    inventory = InventoryService()
    for producto in inventory_input.productos:
        inventory.add_product(producto)
    return inventory


def run_report(inventory: InventoryService, inventory_input: InventoryInput) -> list[str]:
    """Ejecuta la secuencia fija de consultas y retorna las lineas del reporte."""
    query = inventory_input.query
    lines = format_listing(query.categoria, inventory.get_products_by_category(query.categoria))
    lines.extend(format_listing(query.nombre, inventory.search_products_by_name(query.nombre)))
    lines.append(format_total_value(inventory.calculate_total_value()))
    lines.extend(format_category_counts(inventory.get_products_by_category_with_count()))
    lines.extend(format_grouped_products(inventory.get_all_products_by_category()))

    inventory.remove_products_by_name(query.nombre_a_eliminar)
    lines.append(format_new_total_value(inventory.calculate_total_value()))
    return lines


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Punto de entrada CLI."""
    args = parse_args(argv)
    configure_logging(args.log_level)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        inventory_input = parse_inventory_input(read_input_text(args.input, stdin))
        inventory = build_inventory(inventory_input)
        LOGGER.info("Inventario cargado con %s productos.", len(inventory))
        lines = run_report(inventory, inventory_input)
    except (ValidationError, ServiceError) as exc:
        LOGGER.error("No fue posible generar el reporte: %s", exc)
        return 1

    stdout.write("\n".join(lines) + "\n")
    stdout.flush()
    LOGGER.info("Reporte generado (%s lineas).", len(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
