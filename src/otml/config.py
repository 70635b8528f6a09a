import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "otml.yml"


class OTMLConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = bool(data.get("debug", False))


def load_config(path: Path = CONFIG_PATH) -> 'OTMLConfig':
    # An installed copy has no config/ tree next to it; run on defaults.
    if not path.exists():
        return OTMLConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping: {path}")

    return OTMLConfig(data)


_config_cache = None


def get_config() -> 'OTMLConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the file."""
    global _config_cache
    _config_cache = None
