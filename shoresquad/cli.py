"""CLI entry point for the ShoreSquad forecast widget."""

import argparse
import asyncio
import logging
import sqlite3

from pydantic import BaseModel

from shoresquad.cache.ttl_cache import TtlCache
from shoresquad.config.loader import get_config_value, load_config
from shoresquad.config.schema import WidgetConfig
from shoresquad.controller.widget import WidgetController
from shoresquad.ingest.forecast_api import ForecastApi
from shoresquad.ingest.forecast_client import ForecastClient
from shoresquad.render.formatters import (
    format_view_html,
    format_view_json,
    format_view_text,
)
from shoresquad.storage.database import connect, run_migrations
from shoresquad.storage.kv_store import SqliteKeyValueStore
from shoresquad.storage.saved_events import SavedEventSet
from shoresquad.ui.port import MemoryUi

FORMATTERS = {
    "text": format_view_text,
    "json": format_view_json,
    "html": format_view_html,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="shoresquad",
        description="ShoreSquad beach-cleanup weather widget",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")

    sub = parser.add_subparsers(dest="command")

    # show / refresh
    for name, help_text in (
        ("show", "Show the forecast, from cache when fresh"),
        ("refresh", "Drop the cached forecast and fetch again"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--format", choices=sorted(FORMATTERS), default="text")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. refresh.ack_seconds")

    # save / saved
    save_p = sub.add_parser("save", help="Toggle a saved event")
    save_p.add_argument("event_id")
    sub.add_parser("saved", help="List saved events")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db is not None:
        config = config.model_copy(
            update={"cache": config.cache.model_copy(update={"db_path": args.db})}
        )

    if args.command in ("show", "refresh"):
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "save":
        return _cmd_save(config, args)
    elif args.command == "saved":
        return _cmd_saved(config)
    else:
        parser.print_help()
        return 1


def build_controller(
    config: WidgetConfig, conn: sqlite3.Connection, ui: MemoryUi
) -> WidgetController:
    store = SqliteKeyValueStore(conn)
    cache = TtlCache(store, key=config.cache.key)
    api = ForecastApi(
        url=config.forecast.url,
        user_agent=config.forecast.user_agent,
        timeout=config.forecast.timeout_seconds,
    )
    return WidgetController(ForecastClient(api, cache), cache, ui, config.refresh)


def _open_db(config: WidgetConfig) -> sqlite3.Connection:
    conn = connect(config.cache.db_path)
    run_migrations(conn)
    return conn


def _cmd_forecast(config: WidgetConfig, args) -> int:
    conn = _open_db(config)
    try:
        ui = MemoryUi(refresh_label=config.refresh.label)
        # the label is never shown in a terminal, so do not wait to revert it
        config = config.model_copy(
            update={"refresh": config.refresh.model_copy(update={"ack_seconds": 0.0})}
        )
        controller = build_controller(config, conn, ui)
        if args.command == "refresh":
            view = asyncio.run(controller.refresh())
        else:
            view = asyncio.run(controller.load())
    finally:
        conn.close()

    if view is None:
        return 1
    print(FORMATTERS[args.format](view))
    return 1 if view.unavailable else 0


def _cmd_config(config: WidgetConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    if args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError:
            print(f"Unknown config key: {args.key}")
            return 1
        if isinstance(value, BaseModel):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Usage: shoresquad config show|get <key>")
    return 1


def _cmd_save(config: WidgetConfig, args) -> int:
    conn = _open_db(config)
    try:
        saved = SavedEventSet(SqliteKeyValueStore(conn), key=config.saved_events.key)
        now_saved = saved.toggle(args.event_id)
    finally:
        conn.close()
    print(f"{args.event_id}: {'Saved' if now_saved else 'Save'}")
    return 0


def _cmd_saved(config: WidgetConfig) -> int:
    conn = _open_db(config)
    try:
        events = SavedEventSet(SqliteKeyValueStore(conn), key=config.saved_events.key).all()
    finally:
        conn.close()
    if not events:
        print("No saved events")
    for event_id in events:
        print(event_id)
    return 0
