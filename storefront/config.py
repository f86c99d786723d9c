# storefront/config.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import copy, os, string
import yaml

DEFAULTS: Dict[str, Any] = {
    "display": {
        "category_width": 20,
        "item_width": 20,
    },
    "orders": {
        "id_length": 5,
        "id_alphabet": string.ascii_uppercase + string.digits,
    },
    "logging": {
        "level": "INFO",
    },
}

@dataclass
class Settings:
    category_width: int = DEFAULTS["display"]["category_width"]
    item_width: int = DEFAULTS["display"]["item_width"]
    order_id_length: int = DEFAULTS["orders"]["id_length"]
    order_id_alphabet: str = DEFAULTS["orders"]["id_alphabet"]
    log_level: str = DEFAULTS["logging"]["level"]

def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out

def load_config(path: str | Path = "store.yaml") -> dict:
    p = Path(path)
    if not p.exists():
        return copy.deepcopy(DEFAULTS)
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{p} must contain a mapping at the top level")
    return _merge(DEFAULTS, raw)

def load_settings(path: str | Path = "store.yaml") -> Settings:
    cfg = load_config(path)
    display, orders = cfg["display"], cfg["orders"]
    level = os.getenv("LOG_LEVEL") or cfg["logging"]["level"]

    s = Settings(
        category_width=int(display["category_width"]),
        item_width=int(display["item_width"]),
        order_id_length=int(orders["id_length"]),
        order_id_alphabet=str(orders["id_alphabet"]),
        log_level=str(level).upper(),
    )
    if s.order_id_length <= 0 or not s.order_id_alphabet:
        raise ValueError("orders.id_length must be positive and orders.id_alphabet non-empty")
    return s
