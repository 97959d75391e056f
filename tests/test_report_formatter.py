"""Tests del formateo de lineas del reporte."""

from __future__ import annotations

import unittest

from cliente.backend.report_formatter import (
    format_category_counts,
    format_grouped_products,
    format_listing,
    format_new_total_value,
    format_total_value,
)
from servidor.domain.models import Producto


class ReportFormatterTests(unittest.TestCase):
    """Valida el formato textual fijo del reporte."""

    def test_format_listing(self) -> None:
        """Encabezado con dos puntos y una linea por producto."""
        lines = format_listing("Fruit", [Producto("Apple", "Fruit", 10, 5)])
        self.assertEqual(lines, ["Fruit:", "Product Name:Apple Category:Fruit"])

    def test_format_listing_vacio(self) -> None:
        """Sin productos solo se imprime el encabezado."""
        self.assertEqual(format_listing("Meat", []), ["Meat:"])

    def test_format_totals(self) -> None:
        self.assertEqual(format_total_value(62), "Total Value:$62")
        self.assertEqual(format_new_total_value(12), "New Total Value:$12")

    def test_format_category_counts(self) -> None:
        self.assertEqual(
            format_category_counts({"Fruit": 2, "Meat": 1}),
            ["Fruit:2", "Meat:1"],
        )

    def test_format_grouped_products(self) -> None:
        """Cada categoria seguida de lineas con nombre y precio."""
        grouped = {
            "Fruit": [Producto("Apple", "Fruit", 10, 5)],
            "Meat": [Producto("Beef", "Meat", 1, 20)],
        }

        self.assertEqual(
            format_grouped_products(grouped),
            [
                "Fruit:",
                "Product Name:Apple Price:5",
                "Meat:",
                "Product Name:Beef Price:20",
            ],
        )


if __name__ == "__main__":
    unittest.main()
