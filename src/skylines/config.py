import json
from pathlib import Path
from typing import Any, Dict, Optional

from appdirs import user_cache_dir, user_config_dir

from .paths import APP_ID, APP_AUTHOR, CLINES_URL, HYGDATA_URL, OUTPUT_PRECISION


_config_dir = Path(user_config_dir(APP_ID, APP_AUTHOR))
_config_file = _config_dir / "config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "clines_url": CLINES_URL,
    "hygdata_url": HYGDATA_URL,
    "precision": OUTPUT_PRECISION,
}


def cache_dir() -> Path:
    """Directory where downloaded source files are kept."""
    path = Path(user_cache_dir(appname=APP_ID, appauthor=APP_AUTHOR))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _as_precision(value: Any) -> Optional[int]:
    """null disables rounding; anything that is not a whole number falls back to the default."""
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return OUTPUT_PRECISION


def load_config() -> Dict[str, Any]:
    config = DEFAULT_CONFIG.copy()
    try:
        data = json.loads(_config_file.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return config
    except json.JSONDecodeError:
        return config
    if isinstance(data, dict):
        config.update({k: data[k] for k in DEFAULT_CONFIG if k in data})
    config["precision"] = _as_precision(config["precision"])
    return config


def save_config(config: Dict[str, Any]) -> None:
    _config_file.parent.mkdir(parents=True, exist_ok=True)
    out = {k: config.get(k, DEFAULT_CONFIG[k]) for k in DEFAULT_CONFIG}
    _config_file.write_text(json.dumps(out, ensure_ascii=False, indent=2), encoding="utf-8")
