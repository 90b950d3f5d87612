# courier/app/cli.py
import argparse
import sys

from courier.app.build import build
from courier.domain.errors import DeliveryFailure
from courier.io.config import load_config
from courier.io.inputs import load_deliveries, load_street_map
from courier.io.plan_logging import default_json_logger


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="courier-plan",
        description="Plan a single-courier delivery tour over a street map.",
    )
    parser.add_argument("map", help="street map file")
    parser.add_argument("deliveries", help="depot + deliveries file")
    parser.add_argument("--config", help="JSON planner config")
    parser.add_argument("--seed", type=int, help="override the config's master seed")
    parser.add_argument(
        "--quiet", action="store_true", help="suppress the JSON log on stderr"
    )
    return parser


def main(argv=None) -> int:
    args = _parser().parse_args(argv)

    try:
        overrides = {} if args.seed is None else {"seed": args.seed}
        cfg = load_config(args.config, **overrides)
    except (OSError, ValueError) as exc:
        print(f"courier-plan: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        # loader warnings go through the same JSON handler as the plan log
        default_json_logger(level="DEBUG" if cfg.log.debug else cfg.log.level)

    try:
        graph = load_street_map(args.map)
        depot, stops = load_deliveries(args.deliveries)
    except (OSError, ValueError) as exc:
        print(f"courier-plan: {exc}", file=sys.stderr)
        return 1

    app = build(cfg, graph, use_logging=not args.quiet)

    print("Generating route...\n\n")
    try:
        plan = app.planner.generate_plan(depot, stops)
    except DeliveryFailure as exc:
        print(exc.message, file=sys.stderr)
        return 1

    for line in plan.lines():
        print(line)
    print("You are back at the depot and your deliveries are done!")
    print(f"{plan.total_distance_mi:.2f} miles travelled for all deliveries.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
