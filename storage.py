# storage.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# path setup
ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"
CONFIG_PATH = DATA_DIR / "config.json"
LOG_PATH = DATA_DIR / "app.log"

DEFAULT_CONFIG: Dict[str, Any] = {
    "theme": "light",
    "log_level": "INFO",
    "window_title": "Holdtimer",
}


def ensure_data_files(default_config: Optional[Dict[str, Any]] = None) -> None:
    """
    check and create data directory and config file if they do not exist.
    """
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    if not CONFIG_PATH.exists():
        save_config(dict(default_config or DEFAULT_CONFIG))


def load_config() -> Dict[str, Any]:
    """
    read config.json, filling missing keys from DEFAULT_CONFIG.
    a corrupt file is overwritten with the defaults.
    """
    default = dict(DEFAULT_CONFIG)
    if not CONFIG_PATH.exists():
        return default
    try:
        with CONFIG_PATH.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Unreadable config %s (%s), restoring defaults", CONFIG_PATH, e)
        save_config(default)
        return default
    if not isinstance(data, dict):
        logger.warning("Config %s is not an object, restoring defaults", CONFIG_PATH)
        save_config(default)
        return default
    default.update(data)
    return default


def save_config(cfg: Dict[str, Any]) -> None:
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with CONFIG_PATH.open("w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
