from __future__ import annotations

import json
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from carryon.tasks.check_suitcase import EXIT_INVALID_INPUT, EXIT_LOAD_FAILED, main

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _table_args(data_dir: Path = DATA_DIR) -> list[str]:
    return [
        "--airlines",
        str(data_dir / "airline.tsv"),
        "--baggage",
        str(data_dir / "carry-on-baggage.tsv"),
        "--countries",
        str(data_dir / "country.tsv"),
    ]


def test_cli_prints_report_for_bundled_tables(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--width", "50", "--height", "35", "--depth", "20", "--weight", "6", *_table_args()])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["total_airlines"] == 10
    assert payload["volume"] == 35000
    assert payload["suitcase"]["total_length"] == 105
    compatible = [entry["icao"] for entry in payload["compatible"]]
    assert compatible == ["ANA", "JAL", "APJ", "KAL", "UAL", "DLH", "QFA", "QFA"]
    assert list(payload["region_breakdown"]) == ["東アジア", "北アメリカ", "ヨーロッパ", "その他"]
    assert payload["compatibility_rate"] == 80
    assert "incompatible" not in payload


def test_cli_show_incompatible(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        ["--width", "50", "--height", "35", "--depth", "20", "--show-incompatible", *_table_args()]
    )

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    incompatible = [entry["icao"] for entry in payload["incompatible"]]
    assert incompatible == ["ANA", "JAL"]
    assert payload["restriction_analysis"]["dimension_issues"] == 2


def test_cli_rejects_invalid_input(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--width", "0", "--height", "35", "--depth", "20", *_table_args()])

    assert code == EXIT_INVALID_INPUT
    assert capsys.readouterr().out == ""


def test_cli_reports_load_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--width", "50", "--height", "35", "--depth", "20", *_table_args(tmp_path)])

    assert code == EXIT_LOAD_FAILED
    assert capsys.readouterr().out == ""


def test_cli_output_is_strict_json_for_unparseable_limits(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "airline.tsv").write_text(
        (DATA_DIR / "airline.tsv").read_text(encoding="utf-8"), encoding="utf-8"
    )
    (tmp_path / "country.tsv").write_text(
        (DATA_DIR / "country.tsv").read_text(encoding="utf-8"), encoding="utf-8"
    )
    (tmp_path / "carry-on-baggage.tsv").write_text(
        "ICAO code\t種別\t条件\tW(cm)\tH(cm)\tD(cm)\tLength(cm)\tWeight(kg)\n"
        "ANA\t-\t-\tinvalid\t40\t25\t115\t10\n"
        "UAL\t-\t-\tInfinity\t35\t22\tN/A\tN/A\n",
        encoding="utf-8",
    )

    code = main(
        ["--width", "50", "--height", "35", "--depth", "20", "--show-incompatible", *_table_args(tmp_path)]
    )

    assert code == 0
    payload = json.loads(capsys.readouterr().out, parse_constant=_reject_constant)
    assert payload["incompatible"][0]["icao"] == "ANA"
    assert payload["incompatible"][0]["restrictions"]["width"] is None
    assert payload["compatible"][0]["icao"] == "UAL"
    assert payload["compatible"][0]["restrictions"]["width"] is None


def _reject_constant(token: str) -> float:
    raise ValueError(f"non-standard JSON token {token}")
