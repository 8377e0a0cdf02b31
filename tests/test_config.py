import sys
import logging
import pathlib

# Add project root to path for testing
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import sandblast.config as config
from sandblast.options import ExtractOptions

def test_defaults_when_file_missing(tmp_path):
    cfg = config.SandblastConfig(str(tmp_path / "missing.yaml"))
    assert cfg.get('extract.parser') == 'html5lib'
    assert cfg.get('extract.keep_links') is False
    assert cfg.get('fetch.timeout_seconds') == 20
    assert cfg.get('no.such.key', 'fallback') == 'fallback'

def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "sandblast.yaml"
    path.write_text("extract:\n  keep_links: true\nfetch:\n  user_agent: TestBot\n")
    cfg = config.SandblastConfig(str(path))
    assert cfg.get('extract.keep_links') is True
    assert cfg.get('extract.parser') == 'html5lib'
    assert cfg.get('fetch.user_agent') == 'TestBot'
    assert cfg.get_section('fetch')['timeout_seconds'] == 20

def test_invalid_yaml_falls_back(tmp_path, caplog):
    path = tmp_path / "broken.yaml"
    path.write_text("extract: [unclosed\n")
    with caplog.at_level(logging.WARNING, logger="sandblast.config"):
        cfg = config.SandblastConfig(str(path))
    assert cfg.get('extract.parser') == 'html5lib'
    assert "Could not load config" in caplog.text

def test_env_var_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("extract:\n  destructive: true\n")
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))
    cfg = config.SandblastConfig()
    assert cfg.config_path == path
    assert cfg.get('extract.destructive') is True

def test_options_from_config(tmp_path):
    path = tmp_path / "opts.yaml"
    path.write_text("extract:\n  keep_links: true\n")
    options = ExtractOptions.from_config(config.SandblastConfig(str(path)))
    assert options == ExtractOptions(keep_links=True, destructive=False)

def test_global_instance_can_be_replaced(tmp_path):
    custom = config.SandblastConfig(str(tmp_path / "missing.yaml"))
    config.set_config(custom)
    try:
        assert config.get_config() is custom
    finally:
        config.set_config(None)

if __name__ == "__main__":
    print("run with pytest: these tests use fixtures")
