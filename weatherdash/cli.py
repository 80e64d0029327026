"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import logging

from weatherdash.config.loader import (
    get_config_value,
    load_config,
    redacted_json,
    set_config_value,
)
from weatherdash.errors import SearchError
from weatherdash.reporting.formatters import format_card
from weatherdash.state.dashboard_state import build_state

DEFAULT_CONFIG = "ops/configs/dashboard.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Current weather dashboard",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--fahrenheit", action="store_true", help="Display temperatures in °F"
    )

    sub = parser.add_subparsers(dest="command")

    # show
    sub.add_parser("show", help="Fetch and print the default cities")

    # search
    search_p = sub.add_parser("search", help="Load defaults, then search a city")
    search_p.add_argument("city", help="City name")

    # serve
    serve_p = sub.add_parser("serve", help="Run the web dashboard")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.fahrenheit:
        display = config.display.model_copy(update={"use_celsius": False})
        config = config.model_copy(update={"display": display})

    if args.command == "show":
        return _cmd_show(config)
    elif args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _print_cards(state) -> None:
    view = state.snapshot()
    if not view.records:
        print("No weather data available")
    for record in view.records:
        print(format_card(record, view.use_celsius))
        print()


def _cmd_show(config) -> int:
    state = build_state(config)
    asyncio.run(state.initialize(config.default_cities))
    _print_cards(state)
    return 0


def _cmd_search(config, args) -> int:
    state = build_state(config)

    async def run() -> None:
        await state.initialize(config.default_cities)
        await state.search(args.city)

    try:
        asyncio.run(run())
    except SearchError as e:
        print(f"Error: {e.message}")
        return 1
    _print_cards(state)
    return 0


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherdash.dashboard import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
