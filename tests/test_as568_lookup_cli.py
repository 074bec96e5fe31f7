from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from tools.as568_lookup import main


def test_lookup_bundled_table(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GLAND_AS568_MM", raising=False)
    rc = main(["--variant", "mm", "--query", "004"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out[:3] == ["OK", "variant: mm", "matches: 1"]
    assert out[3] == "004\tcs=1.78\tid=1.78"


def test_lookup_custom_source(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    table = tmp_path / "sizes.csv"
    table.write_text("Dash,CS,ID\n10,1,2\n9,1,3\n", encoding="utf-8")
    rc = main(["--source", str(table)])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out[3:] == ["9\tcs=1\tid=3", "10\tcs=1\tid=2"]


def test_lookup_failure_exit_code(tmp_path: Path) -> None:
    assert main(["--source", str(tmp_path / "missing.csv")]) == 4
