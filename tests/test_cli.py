from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

try:
    from typer.testing import CliRunner
    from cli import app
except ModuleNotFoundError as exc:  # pragma: no cover - env-dependent
    CliRunner = None  # type: ignore[assignment]
    app = None  # type: ignore[assignment]
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


FIXTURE = Path(__file__).parent / "fixtures" / "cases.csv"


@unittest.skipIf(app is None, f"Missing dependency: {_IMPORT_ERROR}")
class ChequeCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_convert_prints_wording(self) -> None:
        result = self.runner.invoke(app, ["cheque", "convert", "1234.5"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "壹仟貳佰叁拾肆圓伍角")

    def test_convert_accepts_separators(self) -> None:
        result = self.runner.invoke(app, ["cheque", "convert", "1,000,001"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("壹佰萬零壹圓整", result.output)

    def test_convert_rejection_exits_nonzero(self) -> None:
        result = self.runner.invoke(app, ["cheque", "convert", "abc"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("輸入格式錯誤", result.output)

    def test_watch_converts_each_line(self) -> None:
        result = self.runner.invoke(app, ["cheque", "watch", "-c"], input="10001\n-5\nq\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("壹萬零壹圓整", result.output)
        self.assertIn("不支持負數", result.output)
        self.assertIn("請先輸入有效的金額", result.output)

    def test_watch_stops_at_eof(self) -> None:
        result = self.runner.invoke(app, ["cheque", "watch"], input="0\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("零圓整", result.output)


@unittest.skipIf(app is None, f"Missing dependency: {_IMPORT_ERROR}")
class VerifyCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_golden_fixture(self) -> None:
        result = self.runner.invoke(app, ["verify", "--no-table", str(FIXTURE)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Pass rate: 100.00%", result.output)

    def test_fixture_from_environment(self) -> None:
        result = self.runner.invoke(app, ["verify"], env={"CHEQUE_CASES": str(FIXTURE)})
        self.assertEqual(result.exit_code, 0, result.output)

    def test_failures_exit_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "cases.csv"
            path.write_text("input,expected\n1,壹圓整\n2,壹圓整\n", encoding="utf-8")
            result = self.runner.invoke(app, ["verify", str(path)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Pass rate: 50.00%", result.output)
        self.assertIn("貳圓整", result.output)

    def test_missing_file_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            result = self.runner.invoke(app, ["verify", str(Path(tmp_dir) / "missing.csv")])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("CSV not found", result.output)


if __name__ == "__main__":
    unittest.main()
