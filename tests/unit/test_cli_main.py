from __future__ import annotations
from pathlib import Path
from pan_validation.cli import main as cli_main


def test_cli_sample_run(write_config, sample_csv: Path, temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY processed=5 valid=0 invalid=2 blank=3 null_or_blank=2 duplicates=1" in out
    assert (temp_workdir / "output" / "classification.csv").exists()
    assert (temp_workdir / "output" / "summary.csv").exists()


def test_cli_input_missing(write_config, temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR processing: input file not found:" in out


def test_cli_input_override(write_config, temp_workdir: Path, capsys):
    other = temp_workdir / "data" / "other.csv"
    other.write_text("PAN_NUMBER\nBNZPA2318K\n", encoding="utf-8")
    code = cli_main(["--input", str(other)])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY processed=1 valid=1 invalid=0 blank=0" in out


def test_cli_config_option(temp_workdir: Path, sample_csv: Path, capsys):
    cfg = temp_workdir / "custom.yml"
    cfg.write_text(f"input_path: {sample_csv.as_posix()}\n", encoding="utf-8")
    code = cli_main(["--config", str(cfg)])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY processed=5" in out
    # no output_directory configured
    assert not (temp_workdir / "output").exists()


def test_cli_dotenv_overrides_input(write_config, temp_workdir: Path, capsys, monkeypatch):
    # registers the variable so monkeypatch restores it after load_dotenv overwrites it
    monkeypatch.setenv("PAN_INPUT_PATH", "unused.csv")
    other = temp_workdir / "data" / "env.csv"
    other.write_text("PAN_NUMBER\nQWERT9876Y\nqwert9876y\n", encoding="utf-8")
    (temp_workdir / ".env").write_text(f"PAN_INPUT_PATH={other.as_posix()}\n", encoding="utf-8")
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY processed=2 valid=1 invalid=0 blank=1 null_or_blank=0 duplicates=1" in out


def test_cli_profile(write_config, sample_csv: Path, capsys):
    code = cli_main(["--profile"])
    out = capsys.readouterr().out
    assert code == 0
    assert "INFO profile records=5 missing=1 blank=1 untrimmed=1 not_uppercase=1" in out
    assert "SUMMARY" not in out


def test_cli_debug(write_config, sample_csv: Path, capsys):
    code = cli_main(["--debug"])
    out = capsys.readouterr().out
    assert code == 0
    assert "DEBUG debug mode enabled" in out
    assert "DEBUG read 5 records from" in out
