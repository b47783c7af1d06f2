# demo_settings.py
from __future__ import annotations

import copy
from typing import Any

import yaml  # type: ignore[import-untyped]

from validators import Validator

# Built-in scenario; a settings file only overrides what it names.
DEFAULT_SETTINGS: dict[str, Any] = {
    "observer": {
        "tv_channel": "Star Sports",
        "mobile_app": "JioCinema",
        "updates": [
            "CSK: 150/3 IN 18 OVERS",
            "CSK: 180/4 IN 20 OVERS",
        ],
        "final_update": "CSK WON BY 20 RUNS",
    },
    "factory": {
        "vehicles": [
            {"type": "car", "horsepower": 150},
            {"type": "truck", "horsepower": 400},
        ],
    },
    "composite": {
        "tree": {
            "name": "Root",
            "children": [
                {"name": "Documents", "children": ["Resume.docx", "Notes.txt"]},
                {"name": "Pictures", "children": ["Photo.jpg"]},
            ],
        },
    },
    "prototype": {
        "spawn": ["orc", "orc", "troll"],
    },
    "proxy": {
        "report_name": "Annual_Report_2024.pdf",
        "load_delay": 2.0,
    },
}

SECTIONS = tuple(DEFAULT_SETTINGS)


def _read_mapping(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Settings YAML must be a mapping of demo sections.")
    return data


def merge_settings(overrides: dict[str, Any]) -> dict[str, Any]:
    """
    Returns defaults with `overrides` applied section by section.
    Unknown sections and non-mapping sections are rejected.
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    for section, values in overrides.items():
        if section not in settings:
            raise ValueError(
                f"Unknown settings section '{section}'. Expected one of: {', '.join(SECTIONS)}."
            )
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ValueError(f"Settings section '{section}' must be a mapping.")
        settings[section].update(values)
    _check(settings)
    return settings


def load_settings(path: str | None = None) -> dict[str, Any]:
    if not path:
        return merge_settings({})
    return merge_settings(_read_mapping(path))


def _check(settings: dict[str, Any]) -> None:
    # Shape checks; other values are validated by the demo objects themselves.
    obs = settings["observer"]
    if not isinstance(obs["updates"], list):
        raise ValueError("'observer.updates' must be a list of score strings.")
    obs["updates"] = [
        Validator.require_non_empty(f"observer.updates[{idx}]", status)
        for idx, status in enumerate(obs["updates"])
    ]
    obs["final_update"] = Validator.require_non_empty("observer.final_update", obs["final_update"])
    if not isinstance(settings["factory"]["vehicles"], list):
        raise ValueError("'factory.vehicles' must be a list.")
    for item in settings["factory"]["vehicles"]:
        if not isinstance(item, dict) or "type" not in item or "horsepower" not in item:
            raise ValueError("Each 'factory.vehicles' item needs 'type' and 'horsepower'.")
    if not isinstance(settings["prototype"]["spawn"], list):
        raise ValueError("'prototype.spawn' must be a list of prototype keys.")
