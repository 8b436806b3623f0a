"""CLI: check the converter against a CSV file of expected cheque wordings.

The CSV has a header row followed by rows of ``input,expected``. Inputs that
contain thousands separators must be quoted, e.g. ``"1,234.50",壹仟貳佰叁拾肆圓伍角``.

Examples:
    py cli.py verify tests/fixtures/cases.csv
    py cli.py verify --no-table tests/fixtures/cases.csv   # options go before the path
    CHEQUE_CASES=my_cases.csv py cli.py verify
"""

from __future__ import annotations

import csv
import os
from dataclasses import dataclass, field
from typing import Callable, Iterable, List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ._cli_common import new_typer_app
from ._cli_output import error, fatal, success
from .cheque import convert

DEFAULT_CASES = "用例.csv"


@dataclass(frozen=True)
class FixtureCase:
    index: int
    input: str
    expected: str


@dataclass(frozen=True)
class CaseResult:
    case: FixtureCase
    actual: str

    @property
    def passed(self) -> bool:
        return self.actual == self.case.expected


@dataclass
class HarnessReport:
    results: List[CaseResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def failures(self) -> List[CaseResult]:
        return [r for r in self.results if not r.passed]

    @property
    def pass_rate(self) -> float:
        """Percentage of passing rows; 0.0 for an empty fixture."""
        if not self.results:
            return 0.0
        return self.passed * 100.0 / self.total


def read_cases(path: str) -> List[FixtureCase]:
    """Read (input, expected) rows from a CSV file, skipping the header row.

    Blank rows and rows with fewer than two columns are ignored. Cases are
    numbered from 1 in file order.
    """
    path = os.path.expanduser(path)
    if not os.path.isfile(path):
        raise FileNotFoundError(path)

    cases: List[FixtureCase] = []
    # utf-8-sig tolerates the BOM spreadsheet tools put in front of the header
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        for row in reader:
            if len(row) < 2 or not any(cell.strip() for cell in row):
                continue
            cases.append(FixtureCase(index=len(cases) + 1, input=row[0].strip(), expected=row[1].strip()))
    return cases


def run_cases(cases: Iterable[FixtureCase], converter: Callable[[str], str] = convert) -> HarnessReport:
    report = HarnessReport()
    for case in cases:
        report.results.append(CaseResult(case=case, actual=converter(case.input)))
    return report


def _render_table(report: HarnessReport) -> Table:
    table = Table(title="Cheque wording check")
    table.add_column("#", justify="right")
    table.add_column("Input")
    table.add_column("Expected")
    table.add_column("Actual")
    table.add_column("Result", justify="center")
    for r in report.results:
        mark = "[green]✓[/green]" if r.passed else "[red]✗[/red]"
        table.add_row(str(r.case.index), escape(r.case.input), escape(r.case.expected), escape(r.actual), mark)
    return table


# User can access help message with shortcut -h
app = new_typer_app()


@app.callback(invoke_without_command=True)
def verify(
    csv_path: str = typer.Argument(
        DEFAULT_CASES,
        envvar="CHEQUE_CASES",
        help="CSV of input,expected rows (header row first)",
    ),
    show_table: bool = typer.Option(True, "--table/--no-table", help="Print every row, not only failures"),
):
    """Run every CSV row through the converter and report mismatches.

    Exits with code 1 when any row fails.
    """
    try:
        cases = read_cases(csv_path)
    except FileNotFoundError:
        fatal(f"CSV not found: {csv_path}")
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        fatal(f"Failed to read CSV '{csv_path}': {exc}")

    report = run_cases(cases)
    console = Console()

    if show_table:
        console.print(_render_table(report))

    console.print(
        f"Total: {report.total} | Passed: [green]{report.passed}[/green] | Failed: [red]{report.failed}[/red]"
    )
    for r in report.failures:
        console.print(f"[red]✗ #{r.case.index}[/red]", highlight=False)
        console.print(f"  input:    {escape(r.case.input)}", highlight=False)
        console.print(f"  expected: {escape(r.case.expected)}", highlight=False)
        console.print(f"  actual:   {escape(r.actual)}", highlight=False)
    console.print(f"Pass rate: {report.pass_rate:.2f}%")

    if report.failed:
        error(f"{report.failed} of {report.total} cases failed")
        raise typer.Exit(code=1)
    success("All cases passed")


# Entry point for running the script directly
if __name__ == '__main__':
    app()
