"""
Tests for the command-line entry point.

main() reconfigures logging to stdout, so output is read with capsys.
"""

from pathlib import Path

from natours.cli import main
from tests.support import write_tours


class TestCheckData:
    def test_valid_file_exits_zero(self, tours_file: Path, capsys) -> None:
        code = main(["check-data", "--file", str(tours_file)])

        assert code == 0
        assert f"2 tours OK in {tours_file} (max id 3)" in capsys.readouterr().out

    def test_malformed_file_exits_one(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "tours.json"
        path.write_text("{", encoding="utf-8")

        assert main(["check-data", "--file", str(path)]) == 1
        assert "invalid JSON" in capsys.readouterr().out

    def test_missing_file_exits_one(self, tmp_path: Path) -> None:
        assert main(["check-data", "--file", str(tmp_path / "nope.json")]) == 1

    def test_duplicate_ids_exit_one(self, tmp_path: Path, capsys) -> None:
        path = write_tours(tmp_path / "tours.json", [{"id": 1}, {"id": 1}])

        assert main(["check-data", "--file", str(path)]) == 1
        assert "Duplicate tour ids: [1]" in capsys.readouterr().out
