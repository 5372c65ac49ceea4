import contextlib
import io
import unittest

from vector2d import cli


def run_quietly(argv: list[str]) -> str:
    with contextlib.redirect_stdout(io.StringIO()):
        return cli.run(argv)


class CliTests(unittest.TestCase):
    def test_vector_result(self) -> None:
        self.assertEqual(run_quietly(["add", "1", "2", "3", "4"]), "(4.0, 6.0)")
        self.assertEqual(run_quietly(["normalize", "3", "4"]), "(0.6, 0.8)")

    def test_scalar_result(self) -> None:
        self.assertEqual(run_quietly(["magnitude", "3", "4"]), "5.0")
        self.assertEqual(run_quietly(["distance", "0", "0", "3", "4"]), "5.0")

    def test_negative_operands_and_precision(self) -> None:
        self.assertEqual(run_quietly(["rotate", "1", "0", "90", "--precision", "3"]), "(0.0, 1.0)")
        self.assertEqual(run_quietly(["negate", "-1", "2"]), "(1.0, -2.0)")

    def test_divide_by_zero_prints_infinity(self) -> None:
        self.assertEqual(run_quietly(["divide", "1", "-1", "0"]), "(inf, -inf)")

    def test_prints_result(self) -> None:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            cli.run(["from-angle", "0"])
        self.assertEqual(buffer.getvalue().strip(), "(1.0, 0.0)")

    def test_wrong_operand_count_exits(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.run(["add", "1", "2"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
