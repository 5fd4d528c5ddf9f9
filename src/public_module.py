from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml


def resolve_config_path() -> Path:
    """Docker volume first, then the local data/ folder next to this module."""
    path = Path("/data/config.yaml")
    if not path.exists():
        path = Path(__file__).resolve().parent / "data" / "config.yaml"
    return path


def load_config(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


CONFIG_PATH = resolve_config_path()
config_data = load_config(CONFIG_PATH)


LOG_NAME: str = str(config_data.get("LOG_NAME", "demo_patterns"))

SETTINGS_FILE: str = str(config_data.get("SETTINGS_FILE", "config.txt"))

SINGLETON_WORKERS: int = int(config_data.get("SINGLETON_WORKERS", 2))

REPORT_STYLE: str = str(config_data.get("REPORT_STYLE", "Default style"))
REPORT_HEADER: str = str(config_data.get("REPORT_HEADER", "Report 2026"))
REPORT_CONTENT: str = str(config_data.get("REPORT_CONTENT", "Sales grew by 20%"))
REPORT_FOOTER: str = str(config_data.get("REPORT_FOOTER", "End of report"))
REPORT_UPDATED_CONTENT: str = str(config_data.get("REPORT_UPDATED_CONTENT", "Updated report content"))

REPORT_FORMATS: List[str] = [str(f) for f in config_data.get("REPORT_FORMATS", ["text", "html", "xml"])]
