import pytest
import yaml
from core.exceptions import ConfigError
from inout.demo_config import DemoConfig, load_demo_config

def _write(tmp_path, doc):
    path = tmp_path / "demo.yml"
    path.write_text(yaml.dump(doc))
    return path

def test_full_config(tmp_path):
    path = _write(tmp_path, {"demo": {
        "size": 64, "seed": 3, "dtype": "complex", "repeats": 4,
        "solver": {"assume_a": "sym", "check_finite": False},
    }})
    cfg = load_demo_config(path)
    assert cfg.size == 64
    assert cfg.seed == 3
    assert cfg.dtype == "complex"
    assert cfg.repeats == 4
    assert cfg.solver.as_kwargs() == {"assume_a": "sym", "check_finite": False}

def test_defaults_applied(tmp_path):
    cfg = load_demo_config(_write(tmp_path, {"demo": {"size": 10}}))
    assert cfg.size == 10
    assert cfg.seed is None
    assert cfg.dtype == "float"
    assert cfg.repeats == 2
    assert cfg.solver.as_kwargs() == {"assume_a": "gen", "check_finite": True}

def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_demo_config(path) == DemoConfig()

@pytest.mark.parametrize("demo", [
    {"size": 0},
    {"dtype": "int"},
    {"repeats": 0},
    {"solver": {"assume_a": "lower"}},
    {"unknown": 1},
])
def test_invalid_values_rejected(tmp_path, demo):
    with pytest.raises(ConfigError):
        load_demo_config(_write(tmp_path, {"demo": demo}))

def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_demo_config(tmp_path / "nope.yml")

def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("demo: [unclosed\n")
    with pytest.raises(ConfigError):
        load_demo_config(path)

def test_top_level_must_be_mapping(tmp_path):
    with pytest.raises(ConfigError):
        load_demo_config(_write(tmp_path, [1, 2, 3]))
