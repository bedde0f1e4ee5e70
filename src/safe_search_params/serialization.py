"""
Serialization helpers for SafeSearchParams snapshots.

Provides lossless JSON/YAML round-trip via an intermediate dict:
    {"query": "a=1&tag=x&tag=y", "entries": [["a", "1"], ["tag", "x"], ["tag", "y"]]}

``entries`` is authoritative; ``query`` is kept for human readers and as a
fallback when a hand-written fixture only provides the string form.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from safe_search_params.params import SafeSearchParams


def params_to_dict(p: SafeSearchParams) -> Dict[str, Any]:
    return {
        "query": p.to_string(),
        "entries": [[key, value] for key, value in p.entries],
    }


def params_from_dict(d: Dict[str, Any]) -> SafeSearchParams:
    entries = d.get("entries")
    if entries is not None:
        return SafeSearchParams([(key, value) for key, value in entries])
    return SafeSearchParams(d.get("query", ""))


def params_to_json(p: SafeSearchParams) -> str:
    return json.dumps(params_to_dict(p), sort_keys=True)


def params_from_json(s: str) -> SafeSearchParams:
    d = json.loads(s)
    return params_from_dict(d)


def params_to_yaml(p: SafeSearchParams) -> str:
    return yaml.safe_dump(params_to_dict(p))


def params_from_yaml(s: str) -> SafeSearchParams:
    d = yaml.safe_load(s)
    return params_from_dict(d)
