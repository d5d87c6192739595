"""CLI entry point for the surf forecast fetcher."""

import argparse
import logging

from surfcast.conditions.rating import rate_conditions
from surfcast.config.loader import load_config
from surfcast.pipeline.fetch_pipeline import FetchPipeline

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="surfcast",
        description="Surf forecast fetcher and condition rater",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch and write forecasts for all spots")
    fetch_p.add_argument("--output-dir", help="Override output.forecasts_dir")
    fetch_p.add_argument("--index", help="Override output.index_path")
    fetch_p.add_argument(
        "--spot", action="append", default=[], help="Only this slug (repeatable)"
    )

    # spots
    sub.add_parser("spots", help="List configured spots")

    # rate
    rate_p = sub.add_parser("rate", help="Rate conditions for given inputs")
    rate_p.add_argument("--wave-ft", type=float, required=True)
    rate_p.add_argument("--wind-mph", type=float, required=True)
    rate_p.add_argument("--wind-dir", type=float, default=None)
    rate_p.add_argument("--facing", type=float, required=True)

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "rate":
        return _cmd_rate(args)

    config = load_config(args.config)

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "spots":
        return _cmd_spots(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_fetch(config, args) -> int:
    output_update = {}
    if args.output_dir:
        output_update["forecasts_dir"] = args.output_dir
    if args.index:
        output_update["index_path"] = args.index
    if output_update:
        config = config.model_copy(
            update={"output": config.output.model_copy(update=output_update)}
        )
    if args.spot:
        known = {s.slug: s for s in config.spots}
        unknown = [slug for slug in args.spot if slug not in known]
        if unknown:
            print(f"Error: unknown spot(s): {', '.join(unknown)}")
            return 1
        disabled = [slug for slug in args.spot if not known[slug].enabled]
        if disabled:
            print(f"Error: disabled spot(s): {', '.join(disabled)}")
            return 1

    pipeline = FetchPipeline(config)
    summary = pipeline.run(args.spot or None)
    return 0 if summary.ok else 1


def _cmd_spots(config) -> int:
    for s in config.spots:
        flag = "" if s.enabled else " (disabled)"
        print(
            f"{s.slug:<22} {s.name:<22} facing {s.facing:>3}° "
            f"tide {s.tide_station_id}{flag}"
        )
    return 0


def _cmd_rate(args) -> int:
    rating = rate_conditions(args.wave_ft, args.wind_mph, args.wind_dir, args.facing)
    print(f"{rating.score}/10 {rating.label} ({rating.color})")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
