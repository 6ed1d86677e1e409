from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from suffixscope.cli.main import build_parser, main


def test_resolve_command_prints_json(psl_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["resolve", "www.example.co.uk", "www.食狮.公司.cn", "--psl", str(psl_path), "--json"])
    lines = capsys.readouterr().out.strip().splitlines()
    first, second = (json.loads(line) for line in lines)
    assert first["registrable_domain"] == "example.co.uk"
    assert second["public_suffix"] == "公司.cn"


def test_resolve_command_plain_output(psl_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["resolve", "foo.blogspot.com", "--psl", str(psl_path)])
    out = capsys.readouterr().out
    assert "suffix=blogspot.com" in out
    assert "section=PRIVATE_DOMAINS" in out


def test_public_suffix_command(psl_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["public-suffix", "example.co.uk", "--psl", str(psl_path), "--section", "ICANN_DOMAINS"])
    assert capsys.readouterr().out.strip() == "co.uk"


def test_public_suffix_command_fails_on_single_label(psl_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["public-suffix", "com", "--psl", str(psl_path)])
    assert excinfo.value.code == 1
    assert "can not contain a public suffix" in capsys.readouterr().err


def test_resolve_csv_command(tmp_path: Path, psl_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    input_csv = tmp_path / "in.csv"
    output_csv = tmp_path / "out.csv"
    input_csv.write_text("domain\nme.github.io\nexample.com\n", encoding="utf-8")
    main(
        [
            "resolve-csv",
            "--input-csv",
            str(input_csv),
            "--output-csv",
            str(output_csv),
            "--psl",
            str(psl_path),
        ]
    )
    assert "Resolved 2 domains (2 with a known suffix)" in capsys.readouterr().out
    df = pd.read_csv(output_csv)
    assert list(df["public_suffix"]) == ["github.io", "com"]


def test_download_command_uses_local_copy(tmp_path: Path, psl_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_dir = tmp_path / "data"
    main(["download-psl", "--output-dir", str(out_dir), "--local", str(psl_path)])
    assert (out_dir / "public_suffix_list.dat").exists()
    assert "Downloaded Public Suffix List" in capsys.readouterr().out


def test_parser_rejects_unknown_section() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["resolve", "example.com", "--section", "FOO"])
