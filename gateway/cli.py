"""CLI entry point for the CWA weather gateway."""

import argparse
import json
import logging

from gateway.config.loader import load_config
from gateway.config.schema import GatewayConfig
from gateway.locations import REGISTRY
from gateway.models.errors import GatewayError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gateway",
        description="CWA 36-hour weather forecast gateway",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP gateway")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Listen port")

    # locations
    sub.add_parser("locations", help="List location codes")

    # forecast
    fc_p = sub.add_parser("forecast", help="Fetch one forecast and print it")
    fc_p.add_argument("location", nargs="?", help="Location code or region name")

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

    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "locations":
        return _cmd_locations()
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config: GatewayConfig, args) -> int:
    import uvicorn

    from gateway.api import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    logging.getLogger(__name__).info("Gateway listening on %s:%d", host, port)
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_locations() -> int:
    entries = REGISTRY.all_entries()
    for code in REGISTRY.all_codes():
        print(f"{code:<16}{entries[code]}")
    print(f"Total: {len(entries)}")
    return 0


def _cmd_forecast(config: GatewayConfig, args) -> int:
    from gateway.api import build_fetcher

    token = args.location or config.default_location
    location = REGISTRY.resolve_or_passthrough(token)
    try:
        report = build_fetcher(config).fetch(location)
    except GatewayError as e:
        print(f"Error: {e.message}")
        return 1
    print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    return 0


def _cmd_config(config: GatewayConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
