from pathlib import Path

import pytest

from mazestack.__main__ import main


class TestCli:
    def test_prints_grid_and_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--width", "7", "--height", "5", "--seed", "1"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "#######"
        assert len(out[4]) == 7
        assert out[5].startswith("start: (1, 1)")
        assert out[6].startswith("walls: ")

    def test_same_seed_same_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = ["--algorithm", "prims", "--entries", "diagonal", "--seed", "abc"]
        main(args)
        first = capsys.readouterr().out
        main(args)
        assert capsys.readouterr().out == first

    def test_entries_open_border(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--width", "9", "--height", "9", "--entries", "left-right"])
        rows = capsys.readouterr().out.splitlines()[:9]
        assert rows[4][0] == "."
        assert rows[4][8] == "."

    def test_too_small_exits_with_usage_error(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--width", "2"])
        assert exc_info.value.code == 2
        assert "at least 3x3" in capsys.readouterr().err

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(SystemExit):
            main(["--algorithm", "kruskal"])

    def test_writes_preview(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        target = tmp_path / "preview.png"
        main(["--width", "9", "--height", "9", "--preview", str(target)])
        assert target.exists()
        assert f"preview: {target}" in capsys.readouterr().out
