"""Tests de punta a punta del driver CLI."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from cliente.main import main

EXAMPLE_INPUT = "2\nApple Fruit 10 5\nBanana Fruit 4 3\nFruit Apple Apple\n"

EXAMPLE_OUTPUT = (
    "Fruit:\n"
    "Product Name:Apple Category:Fruit\n"
    "Product Name:Banana Category:Fruit\n"
    "Apple:\n"
    "Product Name:Apple Category:Fruit\n"
    "Total Value:$62\n"
    "Fruit:2\n"
    "Fruit:\n"
    "Product Name:Apple Price:5\n"
    "Product Name:Banana Price:3\n"
    "New Total Value:$12\n"
)


class MainTests(unittest.TestCase):
    """Valida la secuencia fija de consultas y el formato de salida."""

    def test_ejemplo_desde_stdin(self) -> None:
        """Debe producir el reporte completo del ejemplo."""
        stdout = io.StringIO()

        status_code = main([], stdin=io.StringIO(EXAMPLE_INPUT), stdout=stdout)

        self.assertEqual(status_code, 0)
        self.assertEqual(stdout.getvalue(), EXAMPLE_OUTPUT)

    def test_ejemplo_desde_archivo(self) -> None:
        """Debe leer la entrada desde --input."""
        with tempfile.TemporaryDirectory() as temp_dir:
            input_path = Path(temp_dir) / "entrada.txt"
            input_path.write_text(EXAMPLE_INPUT, encoding="utf-8")
            stdout = io.StringIO()

            status_code = main(
                ["--input", str(input_path)],
                stdin=io.StringIO(""),
                stdout=stdout,
            )

        self.assertEqual(status_code, 0)
        self.assertEqual(stdout.getvalue(), EXAMPLE_OUTPUT)

    def test_log_level_no_altera_reporte(self) -> None:
        """--log-level acepta minusculas y no escribe logs en stdout."""
        stdout = io.StringIO()

        status_code = main(
            ["--log-level", "debug"],
            stdin=io.StringIO(EXAMPLE_INPUT),
            stdout=stdout,
        )

        self.assertEqual(status_code, 0)
        self.assertEqual(stdout.getvalue(), EXAMPLE_OUTPUT)

    def test_consultas_sin_distinguir_mayusculas_y_varias_categorias(self) -> None:
        """Consultas en minusculas y categorias ordenadas lexicograficamente."""
        entrada = (
            "4\n"
            "pear Fruit 2 3\n"
            "Apple Fruit 1 10\n"
            "Beef Meat 1 20\n"
            "apple Snack 2 1\n"
            "fruit APPLE apple\n"
        )
        stdout = io.StringIO()

        status_code = main([], stdin=io.StringIO(entrada), stdout=stdout)

        self.assertEqual(status_code, 0)
        self.assertEqual(
            stdout.getvalue().splitlines(),
            [
                "fruit:",
                "Product Name:Apple Category:Fruit",
                "Product Name:pear Category:Fruit",
                "APPLE:",
                "Product Name:Apple Category:Fruit",
                "Product Name:apple Category:Snack",
                "Total Value:$38",
                "Fruit:2",
                "Meat:1",
                "Snack:1",
                "Fruit:",
                "Product Name:Apple Price:10",
                "Product Name:pear Price:3",
                "Meat:",
                "Product Name:Beef Price:20",
                "Snack:",
                "Product Name:apple Price:1",
                "New Total Value:$26",
            ],
        )

    def test_entrada_invalida_retorna_error(self) -> None:
        """Entrada mal formada no escribe reporte y retorna 1."""
        stdout = io.StringIO()

        with self.assertLogs("cliente.main", level="ERROR"):
            status_code = main(
                [],
                stdin=io.StringIO("1\nApple Fruit x 5\nFruit Apple Apple\n"),
                stdout=stdout,
            )

        self.assertEqual(status_code, 1)
        self.assertEqual(stdout.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
