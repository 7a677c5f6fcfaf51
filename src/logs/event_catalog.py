"""Event template catalog loader (single authoritative JSON)."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}
_JSON_FILENAME = "event_templates.json"  # co-located inside logs/ directory


def _flatten(raw: Mapping[str, Any]) -> dict[tuple[str, str], str]:
    templates: dict[tuple[str, str], str] = {}
    for domain, actions in raw.items():
        if not isinstance(domain, str) or not isinstance(actions, Mapping):
            continue
        for action, template in actions.items():
            if isinstance(action, str) and isinstance(template, str):
                templates[(domain, action)] = template
    return templates


def _load_event_templates(path: Path | None = None) -> dict[tuple[str, str], str]:
    path = path or Path(__file__).with_name(_JSON_FILENAME)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw: Any = json.load(f)
    except FileNotFoundError:
        return {("app", "load_error"): "Event templates file missing"}
    except (OSError, json.JSONDecodeError) as e:
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}
    return _flatten(raw) if isinstance(raw, Mapping) else {}


def reload_event_templates(path: Path | None = None) -> None:
    # Mutate in place so modules holding a reference see the new templates.
    EVENT_TEMPLATES.clear()
    EVENT_TEMPLATES.update(_load_event_templates(path))


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "reload_event_templates"]
