"""Parser de la entrada de texto del inventario."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from parametros import INPUT_ENCODING
from servidor.domain.models import Producto
from shared.errors import ServiceError, ValidationError
from shared.protocol import InventoryInput, InventoryQuery

FIELD_SEPARATOR = re.compile(r"[ \t]+")
PRODUCT_FIELDS = 4
QUERY_FIELDS = 3


def read_input_text(path: Path | None, stream: TextIO) -> str:
    """Lee la entrada desde un archivo o, si no se indica, desde ``stream``."""
    if path is None:
        return stream.read()

    try:
        return path.read_text(encoding=INPUT_ENCODING)
    except OSError as exc:
        raise ServiceError(f"No fue posible leer la entrada: {path}") from exc


def parse_inventory_input(text: str) -> InventoryInput:
    """Parsea conteo, lineas de producto y linea de consultas."""
    lines = _split_lines(text)
    count = parse_count(_line_at(lines, 0, "cantidad de productos"))

    productos = [
        parse_product_line(_line_at(lines, line_number, "producto"), line_number + 1)
        for line_number in range(1, count + 1)
    ]
    query = parse_query_line(_line_at(lines, count + 1, "consultas"), count + 2)
    return InventoryInput(productos=productos, query=query)


def parse_count(line: str) -> int:
    """Parsea la primera linea con la cantidad de productos."""
    count = _parse_int(line.strip(), line_number=1, campo="cantidad")
    if count < 0:
        raise ValidationError(f"Linea 1: la cantidad no puede ser negativa ({count}).")
    return count


def parse_product_line(line: str, line_number: int) -> Producto:
    """Parsea una linea ``nombre categoria stock precio``."""
    fields = _split_fields(line, PRODUCT_FIELDS, line_number)
    nombre, categoria, stock, precio = fields[:PRODUCT_FIELDS]
    return Producto(
        nombre=nombre,
        categoria=categoria,
        stock=_parse_int(stock, line_number=line_number, campo="stock"),
        precio=_parse_int(precio, line_number=line_number, campo="precio"),
    )


def parse_query_line(line: str, line_number: int) -> InventoryQuery:
    """Parsea la linea ``categoria nombre nombre_a_eliminar``."""
    categoria, nombre, nombre_a_eliminar = _split_fields(line, QUERY_FIELDS, line_number)[
        :QUERY_FIELDS
    ]
    return InventoryQuery(
        categoria=categoria,
        nombre=nombre,
        nombre_a_eliminar=nombre_a_eliminar,
    )


def _split_lines(text: str) -> list[str]:
    # Solo "\n" (con "\r" opcional) separa lineas; separadores Unicode quedan en el texto.
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def _line_at(lines: Sequence[str], index: int, descripcion: str) -> str:
    if index >= len(lines):
        raise ValidationError(f"Linea {index + 1}: falta la linea de {descripcion}.")
    return lines[index]


def _split_fields(line: str, expected: int, line_number: int) -> list[str]:
    # Solo espacio y tabulador separan campos; campos extra al final se ignoran.
    fields = [field for field in FIELD_SEPARATOR.split(line.strip(" \t")) if field]
    if len(fields) < expected:
        raise ValidationError(
            f"Linea {line_number}: se esperaban {expected} campos y se encontraron "
            f"{len(fields)}."
        )
    return fields


def _parse_int(raw_value: str, line_number: int, campo: str) -> int:
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValidationError(
            f"Linea {line_number}: {campo} debe ser entero, se recibio '{raw_value}'."
        ) from exc
