"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de formato en los datos de entrada."""


class ServiceError(Exception):
    """Error al leer la entrada del inventario."""
