"""Tests for the canonical JSON normalization layer and the CLI payloads it emits."""

import json
from pathlib import Path

from closure_demo import Record
from closure_demo.config import DemoConfig
from closure_demo.demo import run_counters, run_registries
from closure_demo.utils.json_norm import stable_json_dump, stable_json_dumps


def test_counter_payload_shape():
    s = stable_json_dumps({"counters": run_counters(DemoConfig(instances=3, calls=(2,)))})
    assert s.endswith("\n")
    assert json.loads(s) == {"counters": [[1, 2], [1, 2], [1, 2]]}


def test_registry_payload_keys_are_sorted():
    s = stable_json_dumps(run_registries())
    assert s.index('"a"') < s.index('"b"') < s.index('"lookups"')
    # record fields are sorted as well
    assert s.index('"id"') < s.index('"name"') < s.index('"verse"')


def test_registry_payload_absent_lookup_is_null():
    payload = run_registries([Record(4, "cow", "moo")])
    obj = json.loads(stable_json_dumps(payload))
    assert obj["lookups"] == {"3": None, "4": "moo"}
    assert obj["a"] == [{"id": 4, "name": "cow", "verse": "bark"}]
    assert obj["b"] == [{"id": 4, "name": "cow", "verse": "buzz"}]


def test_stable_json_dumps_converts_dataclasses_tuples_and_paths():
    s = stable_json_dumps({"r": Record(1, "owl", "hoot"), "t": (1, 2), "p": Path("a") / "b"})
    obj = json.loads(s)
    assert obj["r"] == {"id": 1, "name": "owl", "verse": "hoot"}
    assert obj["t"] == [1, 2]
    assert obj["p"] == "a/b"


def test_stable_json_dump_matches_dumps(tmp_path):
    payload = run_registries()
    out = tmp_path / "registry.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump(payload, f)
    assert out.read_text(encoding="utf-8") == stable_json_dumps(payload)
