"""CLI for checking rule files and simulating interception offline."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .observability import metrics_snapshot, reset_metrics
from .ports.scheduler import AsyncioScheduler
from .services.bid_interceptor import BidInterceptor
from .wiring import build_interceptor


def load_json_file(path: Path, what: str):
    """Load a JSON document. Exits with status 1 on a missing file or invalid JSON."""
    if not path.exists():
        print(f"Error: {what} file not found: {path}", file=sys.stderr)
        sys.exit(1)
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        print(f"Error: {what} file is not valid JSON: {e}", file=sys.stderr)
        sys.exit(1)


def load_rules(path: Path) -> list:
    rules = load_json_file(path, "rules")
    if isinstance(rules, dict):
        rules = rules.get("intercept", [])
    if not isinstance(rules, list):
        print("Error: rules file must contain a list of rule definitions.", file=sys.stderr)
        sys.exit(1)
    return rules


def check_rules(path: Path) -> int:
    """Compile a rules file and report on it. Returns the process exit status."""
    rules = load_rules(path)
    interceptor = build_interceptor()
    reset_metrics()
    interceptor.update_config(rules)
    errors = sum(metrics_snapshot()["definition_errors"].values())
    persisted = interceptor.serialize_config(rules)
    print(f"Rules: {len(interceptor.rules)}")
    print(f"Serializable: {len(persisted)}")
    print(f"Definition errors: {errors}")
    return 1 if errors else 0


async def simulate(interceptor: BidInterceptor, bidder_request: dict) -> dict:
    """Run one interception pass on the running loop and collect what it delivers."""
    loop = asyncio.get_running_loop()
    finished = loop.create_future()
    responses: list = []
    paapi: list = []

    def add_bid(response, bid):
        responses.append(response)

    def add_paapi_config(config, bid, request):
        paapi.append({"bidId": bid.get("bidId"), **config})

    def done():
        if not finished.done():
            finished.set_result(None)

    outcome = interceptor.intercept(
        bid_request=bidder_request,
        add_bid=add_bid,
        add_paapi_config=add_paapi_config,
        done=done,
    )
    await finished
    return {
        "responses": responses,
        "paapi": paapi,
        "remaining": [bid.get("bidId") for bid in outcome.bids],
    }


def simulate_request(rules_path: Path, request_path: Path) -> int:
    rules = load_rules(rules_path)
    bidder_request = load_json_file(request_path, "request")
    if not isinstance(bidder_request, dict):
        print("Error: request file must contain a bidder request object.", file=sys.stderr)
        sys.exit(1)
    interceptor = build_interceptor(scheduler=AsyncioScheduler())
    interceptor.update_config(rules)
    result = asyncio.run(simulate(interceptor, bidder_request))
    print(json.dumps(result, indent=2, default=str))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check and simulate bid interceptor rules")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log interceptor activity")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Compile a rules file and report problems")
    check_parser.add_argument("rules", type=Path, help="JSON file with a list of rule definitions")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Intercept a bidder request and print the mocks")
    simulate_parser.add_argument("rules", type=Path, help="JSON file with a list of rule definitions")
    simulate_parser.add_argument("request", type=Path, help="JSON file with a bidder request")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(asctime)s][%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command == "check":
        sys.exit(check_rules(args.rules))
    elif args.command == "simulate":
        sys.exit(simulate_request(args.rules, args.request))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
