# demo_app.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, TextIO

import yaml  # type: ignore[import-untyped]

from demo_settings import SECTIONS, load_settings
from file_composite import FileComponent, build_tree
from game_prototype import CharacterRegistry, GameCharacter, Orc, Troll
from ipl_match import GoogleSearch, IplMatch, MobileApp, TVDisplay
from logging_config import configure_logging
from report_proxy import ReportProxy
from vehicle_factory import Vehicle, VehicleFactory

logger = logging.getLogger(__name__)


ORDINALS = ("First", "Second", "Third", "Fourth", "Fifth")


def _ordinal(number: int) -> str:
    return ORDINALS[number - 1] if number <= len(ORDINALS) else f"#{number}"


# ---------- Observer ----------
def run_observer(cfg: dict[str, Any], stream: TextIO | None = None) -> IplMatch:
    """
    Registers TV, mobile and search viewers, publishes the scheduled scores,
    drops the search viewer and publishes the final result.
    """
    match = IplMatch()
    tv_viewer = TVDisplay(cfg["tv_channel"], stream=stream)
    mobile_app = MobileApp(cfg["mobile_app"], stream=stream)
    google = GoogleSearch(stream=stream)

    match.register(tv_viewer)
    match.register(mobile_app)
    match.register(google)

    for number, status in enumerate(cfg["updates"], start=1):
        print(f"{_ordinal(number)} Match Update", file=stream)
        match.update_match_score(status)

    match.unregister(google)

    print("Final Match Update", file=stream)
    match.update_match_score(cfg["final_update"])
    return match


# ---------- Factory ----------
def run_factory(cfg: dict[str, Any], stream: TextIO | None = None) -> list[Vehicle]:
    vehicles = [
        VehicleFactory.get_vehicle(item["type"], item["horsepower"]) for item in cfg["vehicles"]
    ]
    for number, vehicle in enumerate(vehicles, start=1):
        print(f"Vehicle {number}: {vehicle}", file=stream)
    return vehicles


# ---------- Composite ----------
def run_composite(cfg: dict[str, Any], stream: TextIO | None = None) -> FileComponent:
    root = build_tree(cfg["tree"])
    root.display("", stream=stream)
    return root


# ---------- Prototype ----------
def make_character_registry() -> CharacterRegistry:
    registry = CharacterRegistry()
    registry.add_prototype("orc", Orc())
    registry.add_prototype("troll", Troll())
    return registry


def run_prototype(
    cfg: dict[str, Any],
    stream: TextIO | None = None,
    *,
    registry: CharacterRegistry | None = None,
) -> list[GameCharacter]:
    registry = registry if registry is not None else make_character_registry()
    spawned = [registry.get_prototype(key) for key in cfg["spawn"]]
    for character in spawned:
        character.display(stream=stream)
    return spawned


# ---------- Proxy ----------
def run_proxy(cfg: dict[str, Any], stream: TextIO | None = None) -> ReportProxy:
    report = ReportProxy(cfg["report_name"], load_delay=cfg["load_delay"], stream=stream)
    print("Report created, but not loaded yet...\n", file=stream)

    print("Now displaying the report:\n", file=stream)
    report.display()

    print("\nDisplaying again (should be fast):\n", file=stream)
    report.display()
    return report


DEMOS: dict[str, Callable[..., Any]] = {
    "observer": run_observer,
    "factory": run_factory,
    "composite": run_composite,
    "prototype": run_prototype,
    "proxy": run_proxy,
}


def run_demo(name: str, settings: dict[str, Any], stream: TextIO | None = None) -> Any:
    if name not in DEMOS:
        raise ValueError(f"Unknown demo '{name}'. Expected one of: {', '.join(DEMOS)}.")
    logger.info("Running %s demo", name)
    return DEMOS[name](settings[name], stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-demos",
        description="Console demos of the Observer, Factory, Composite, Prototype and Proxy patterns.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="observer",
        choices=[*SECTIONS, "all"],
        help="which demo to run (default: observer)",
    )
    parser.add_argument("--config", default=None, help="YAML settings file overriding the defaults")
    parser.add_argument(
        "--log-level", default=None, help="log level for stderr (overrides PATTERN_DEMOS_LOG_LEVEL)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = load_settings(args.config)
        names = list(DEMOS) if args.demo == "all" else [args.demo]
        for idx, name in enumerate(names):
            if len(names) > 1:
                if idx:
                    print()
                print(f"==== {name.upper()} ====")
            run_demo(name, settings)
    except FileNotFoundError as exc:
        print(f"! Settings file not found: {exc.filename}", file=sys.stderr)
        return 2
    except (ValueError, KeyError, yaml.YAMLError) as exc:
        print(f"! {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
