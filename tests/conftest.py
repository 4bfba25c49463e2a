# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from pan_validation.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("PAN_INPUT_PATH", raising=False)
        monkeypatch.delenv("PAN_VALIDATION_CONFIG", raising=False)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    # each test gets a handler bound to the current (captured) stdout
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """input_path: ./data/pan_numbers.csv
column: PAN_NUMBER
encoding: utf-8
output_directory: ./output
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "validate.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv(temp_workdir: Path) -> Path:
    """The five-record example: two case variants, a fake, a null and a blank."""
    csv = temp_workdir / "data" / "pan_numbers.csv"
    csv.write_text(
        "PAN_NUMBER\n"
        "ABCDE1234F\n"
        " abcde1234f \n"
        "AAAAA0000A\n"
        "\n"
        "  \n",
        encoding="utf-8",
    )
    return csv


@pytest.fixture()
def mixed_csv(temp_workdir: Path) -> Path:
    csv = temp_workdir / "data" / "pan_numbers.csv"
    csv.write_text(
        "PAN_NUMBER\n"
        "BNZPA2318K\n"
        "bnzpa2318k\n"
        "  BNZPA2318K\n"
        "QWERT9876Y\n"
        "ABCD1234FF\n"
        "XYZAB1234C\n"
        "\n",
        encoding="utf-8",
    )
    return csv
