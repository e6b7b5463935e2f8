"""Tests for the CLI entry point."""

import csv
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from secret_santa.main import app
from secret_santa.output import export_pairing_to_csv, print_draw_summary
from secret_santa.types import DrawResult, DrawStatus

runner = CliRunner()

DATA_DIR = Path(__file__).parent.parent / "data"
EXAMPLE_JSON = str(DATA_DIR / "example_config.json")
EXAMPLE_CSV = str(DATA_DIR / "example_config.csv")
IMPOSSIBLE_JSON = str(DATA_DIR / "impossible_config.json")


class TestCLI:
    """Tests for the CLI command."""

    def test_cli_runs_with_example_json(self):
        result = runner.invoke(app, [EXAMPLE_JSON])
        assert result.exit_code == 0
        assert "Loaded 5 participants and 4 exclusion rules" in result.output
        assert "possible unique pairings" in result.output
        assert "--- Selected Pairing ---" in result.output

    def test_cli_lists_every_giver(self):
        result = runner.invoke(app, [EXAMPLE_JSON, "-s", "1"])
        assert result.exit_code == 0
        for name in ["Alice", "Bob", "Carol", "Dave", "Eve"]:
            assert f"{name} 🎁 --> " in result.output

    def test_cli_runs_with_example_csv(self):
        result = runner.invoke(app, [EXAMPLE_CSV])
        assert result.exit_code == 0
        assert "Loaded 5 participants and 4 exclusion rules" in result.output

    def test_cli_with_seed(self):
        """Same seed, same pairing."""
        result1 = runner.invoke(app, [EXAMPLE_JSON, "-s", "42"])
        result2 = runner.invoke(app, [EXAMPLE_JSON, "--seed", "42"])
        assert result1.exit_code == 0
        assert result2.exit_code == 0
        assert result1.output == result2.output

    def test_cli_no_valid_pairing(self):
        result = runner.invoke(app, [IMPOSSIBLE_JSON])
        assert result.exit_code == 0
        assert "Found 0 possible unique pairings." in result.output
        assert "No valid pairings could be found with these rules!" in result.output

    def test_cli_check_only_feasible(self):
        result = runner.invoke(app, [EXAMPLE_JSON, "--check-only"])
        assert result.exit_code == 0
        assert "Feasibility: Feasible" in result.output
        assert "Selected Pairing" not in result.output

    def test_cli_check_only_infeasible(self):
        result = runner.invoke(app, [IMPOSSIBLE_JSON, "--check-only"])
        assert result.exit_code == 0
        assert "Feasibility: Infeasible" in result.output

    def test_cli_csv_export(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "pairing.csv"
            result = runner.invoke(app, [EXAMPLE_JSON, "-o", str(output_path)])
            assert result.exit_code == 0
            assert output_path.exists()
            assert f"Pairing exported to: {output_path}" in result.output

            with open(output_path, encoding="utf-8") as f:
                reader = csv.reader(f)
                header = next(reader)
                assert header == ["giver", "receiver"]
                rows = list(reader)
                assert [row[0] for row in rows] == ["Alice", "Bob", "Carol", "Dave", "Eve"]

    def test_cli_no_export_without_pairing(self, tmp_path: Path):
        output_path = tmp_path / "pairing.csv"
        result = runner.invoke(app, [IMPOSSIBLE_JSON, "-o", str(output_path)])
        assert result.exit_code == 0
        assert not output_path.exists()

    def test_cli_file_not_found(self):
        result = runner.invoke(app, ["nonexistent_file.json"])
        assert result.exit_code == 1
        assert "Error: File not found" in result.output

    def test_cli_invalid_config(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{broken")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1
        assert "Error loading config file" in result.output

    def test_cli_duplicate_participants(self, tmp_path: Path):
        path = tmp_path / "dupes.json"
        path.write_text('{"participants": ["A", "B", "A"]}')
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1
        assert "Duplicate participants: A" in result.output

    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--seed" in result.output
        assert "--output" in result.output
        assert "--check-only" in result.output
        assert "--log-level" in result.output


class TestOutput:
    """Tests for the output module."""

    def test_print_draw_summary_found(self, capsys):
        result = DrawResult(
            status=DrawStatus.FOUND,
            solution_count=1,
            pairs=[("A", "C"), ("B", "A"), ("C", "B")],
        )

        print_draw_summary(result)
        captured = capsys.readouterr()

        assert "Found 1 possible unique pairings." in captured.out
        assert "--- Selected Pairing ---" in captured.out
        assert "A 🎁 --> C" in captured.out
        assert captured.out.index("A 🎁") < captured.out.index("B 🎁") < captured.out.index("C 🎁")

    def test_print_draw_summary_no_pairing(self, capsys):
        result = DrawResult(status=DrawStatus.NO_VALID_PAIRING, solution_count=0, pairs=[])

        print_draw_summary(result)
        captured = capsys.readouterr()

        assert "Found 0 possible unique pairings." in captured.out
        assert "No valid pairings could be found" in captured.out
        assert "Selected Pairing" not in captured.out

    def test_export_pairing_to_csv(self, tmp_path: Path):
        result = DrawResult(
            status=DrawStatus.FOUND,
            solution_count=2,
            pairs=[("B", "A"), ("A", "B")],
        )

        filepath = tmp_path / "pairing.csv"
        export_pairing_to_csv(result, str(filepath))

        with open(filepath, encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

        assert rows == [
            {"giver": "B", "receiver": "A"},
            {"giver": "A", "receiver": "B"},
        ]

    def test_export_to_invalid_path_raises_error(self):
        result = DrawResult(status=DrawStatus.FOUND, solution_count=1, pairs=[])

        with pytest.raises(OSError, match="Failed to write"):
            export_pairing_to_csv(result, "/nonexistent/directory/file.csv")
