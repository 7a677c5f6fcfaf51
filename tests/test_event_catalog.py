import json

from src.logs import event_catalog
from src.logs.event_catalog import EVENT_TEMPLATES, reload_event_templates


def test_nick_events_present():
    for action in ("switching_nick", "saving_primary", "reclaiming_primary", "exhausted"):
        assert ("nick", action) in EVENT_TEMPLATES


def test_reload_from_custom_file_mutates_in_place(tmp_path):
    path = tmp_path / "templates.json"
    path.write_text(json.dumps({"x": {"y": "z {a}", "bad": 3}, "skip": "me"}))
    ref = event_catalog.EVENT_TEMPLATES
    try:
        reload_event_templates(path)
        assert ref is event_catalog.EVENT_TEMPLATES
        assert ref == {("x", "y"): "z {a}"}
    finally:
        reload_event_templates()
    assert ("nick", "exhausted") in ref


def test_missing_and_broken_files(tmp_path):
    try:
        reload_event_templates(tmp_path / "missing.json")
        assert EVENT_TEMPLATES == {("app", "load_error"): "Event templates file missing"}
        broken = tmp_path / "broken.json"
        broken.write_text("{")
        reload_event_templates(broken)
        assert EVENT_TEMPLATES[("app", "load_error")].startswith("Failed to load")
    finally:
        reload_event_templates()
