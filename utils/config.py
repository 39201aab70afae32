# utils/config.py
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from models.item import DEFAULT_GRACE_DAYS
from services.pricing_service import DEFAULT_SHIPPING_FEE

CONFIG_ENV = "STOREFRONT_CONFIG"


@dataclass
class Settings:
    shipping_fee: float = DEFAULT_SHIPPING_FEE
    expiry_grace_days: int = DEFAULT_GRACE_DAYS
    log_dir: str = "data/logs"


def _read_json(path: Path) -> dict:
    # Missing, empty or unreadable file -> empty dict, caller falls back to defaults.
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read().strip()
            if text == "":
                return {}
            data = json.loads(text)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Load checkout settings from a JSON file.

    The path is taken from the argument, then from the STOREFRONT_CONFIG
    environment variable. Keys that are missing or have the wrong type keep
    their default value, e.g.

        {"shipping_fee": 30.0, "expiry_grace_days": 7, "log_dir": "data/logs"}
    """
    path = path or os.environ.get(CONFIG_ENV)
    defaults = Settings()
    if not path:
        return defaults

    data = _read_json(Path(path))

    fee = data.get("shipping_fee", defaults.shipping_fee)
    if not isinstance(fee, (int, float)) or isinstance(fee, bool) or fee < 0:
        fee = defaults.shipping_fee

    grace = data.get("expiry_grace_days", defaults.expiry_grace_days)
    if not isinstance(grace, int) or isinstance(grace, bool) or grace < 0:
        grace = defaults.expiry_grace_days

    log_dir = data.get("log_dir", defaults.log_dir)
    if not isinstance(log_dir, str) or not log_dir.strip():
        log_dir = defaults.log_dir

    return Settings(shipping_fee=float(fee), expiry_grace_days=grace, log_dir=log_dir)
