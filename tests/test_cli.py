# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""Command line tests: output lines, exit codes and diagnostics."""

import io

import pytest

from benchratio import __version__
from benchratio.cli import main
from conftest import MAP_BASELINE, bench, report_text


def test_map_report(map_report_path, capsys):
    assert main([str(map_report_path), "--sort-types"]) == 0
    out, err = capsys.readouterr()
    lines = out.splitlines()
    assert len(lines) == 9
    assert lines[:3] == ["chaintable_t|Insert|0.5", "chaintable_t|Find|0.8", "chaintable_t|Erase|1"]
    assert "hashtbl_t|Insert|4" in lines
    assert err == ""


def test_default_baseline_matches_reference(map_report_path, capsys):
    assert main([str(map_report_path)]) == 0
    default_out = capsys.readouterr().out
    assert main([str(map_report_path), "--baseline", MAP_BASELINE]) == 0
    assert capsys.readouterr().out == default_out


def test_end_to_end_lines(write_report, capsys):
    path = write_report(report_text(bench("X<B>::BM_Op1", 100), bench("X<C>::BM_Op1", 50)))
    assert main([str(path), "--baseline", "X<B>"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "B|Op1|1" in lines
    assert "C|Op1|2" in lines


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(report_text(bench("X<B>::BM_Op", 4))))
    assert main(["-", "--baseline", "X<B>"]) == 0
    assert capsys.readouterr().out == "B|Op|1\n"


def test_output_file(write_report, tmp_path, capsys):
    path = write_report(report_text(bench("X<B>::BM_Op", 4), bench("X<C>::BM_Op", 8)))
    out_path = tmp_path / "ratios.txt"
    assert main([str(path), "--baseline", "X<B>", "--sort-types", "--output", str(out_path)]) == 0
    assert out_path.read_text() == "B|Op|1\nC|Op|0.5\n"
    out, err = capsys.readouterr()
    assert out == ""
    assert "2 line(s) written" in err


@pytest.mark.parametrize("entries, fragment", [
    ((bench("X<B>::BM_Op1", 100), bench("X<C>BM_Op1", 50)), "Cannot parse benchmark name"),
    ((bench("X<B>::BM_Op1", 100), bench("X<C>::BM_Op2", 50)), "'Op2' has no baseline"),
    ((bench("X<C>::BM_Op1", 50),), "No benchmark name starts with"),
    ((bench("X<B>::BM_Op1", 100, time_unit="ms"),), "unsupported unit 'ms'"),
])
def test_failures_produce_no_output(entries, fragment, write_report, capsys):
    path = write_report(report_text(*entries))
    assert main([str(path), "--baseline", "X<B>"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("ERROR: ")
    assert fragment in err


def test_strict_flag(write_report, capsys):
    path = write_report(report_text(bench("X<B>::BM_Op", 4), bench("X<B>::BM_Op", 4)))
    assert main([str(path), "--baseline", "X<B>"]) == 0
    capsys.readouterr()
    assert main([str(path), "--baseline", "X<B>", "--strict"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "measured more than once" in err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.json")]) == 1
    assert "ERROR: Cannot read report" in capsys.readouterr().err


def test_invalid_json(write_report, capsys):
    assert main([str(write_report("{not json"))]) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_huge_number_reports_error(write_report, capsys):
    path = write_report(report_text(bench("X<B>::BM_Op", 10 ** 400)))
    assert main([str(path), "--baseline", "X<B>"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "ERROR: benchmarks[0].real_time: integer too large" in err


def test_stdin_invalid_utf8_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"\xff\xfe"), encoding="utf-8"))
    assert main(["-", "--baseline", "X<B>"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("ERROR: Cannot read report -")


def test_missing_argument_exits_2(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
