import importlib.util
import json
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "csv_to_json.py"


def load_script():
    spec = importlib.util.spec_from_file_location("csv_to_json_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_script_converts_configured_directory(env_config):
    input_dir, output_dir = env_config
    (input_dir / "a.csv").write_text("a,b,c\n1,2,hello\n")
    (input_dir / "b.csv").write_text("a,b,c\n")

    summary = load_script().main()

    assert summary.converted == 2
    assert json.loads((output_dir / "a.json").read_text()) == [{"a": 1, "b": 2, "c": "hello"}]
    assert (output_dir / "b.json").read_text() == "[]"


def test_script_starts_timing_before_loading_config(env_config, monkeypatch):
    import time

    script = load_script()
    seen = {}
    real_load_config = script.load_config
    real_convert = script.convert_directory

    def recording_load_config():
        seen["config_loaded_at"] = time.perf_counter()
        return real_load_config()

    def recording_convert(input_dir, output_dir, context=None):
        seen["context"] = context
        return real_convert(input_dir, output_dir, context=context)

    monkeypatch.setattr(script, "load_config", recording_load_config)
    monkeypatch.setattr(script, "convert_directory", recording_convert)

    script.main()

    assert seen["context"] is not None
    assert seen["context"].started_at <= seen["config_loaded_at"]
