"""
pytest shared configuration and fixtures
"""

import sys
from pathlib import Path

import pytest

# Make the repository root importable so that `src` resolves
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture
def workdirs(tmp_path):
    """Input and output directories for a conversion run."""
    input_dir = tmp_path / "files"
    output_dir = tmp_path / "outputs"
    input_dir.mkdir()
    output_dir.mkdir()
    return input_dir, output_dir


@pytest.fixture
def env_config(monkeypatch, workdirs):
    """Point the config layer at the temporary directories, without a log file."""
    input_dir, output_dir = workdirs
    monkeypatch.setenv("CSV2JSON_INPUT_DIR", str(input_dir))
    monkeypatch.setenv("CSV2JSON_OUTPUT_DIR", str(output_dir))
    monkeypatch.setenv("LOG_FILE", "")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("CONVERT_INTERVAL_MINUTES", raising=False)
    return input_dir, output_dir
