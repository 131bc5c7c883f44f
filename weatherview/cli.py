"""CLI entry point for the weather viewer."""

import argparse
import logging

from weatherview.config.loader import get_config_value, load_config
from weatherview.models.common import Units
from weatherview.models.weather import Coordinates
from weatherview.pipeline.screen_pipeline import ScreenPipeline
from weatherview.storage.database import open_database
from weatherview.view.formatters import (
    format_favorites_text,
    format_home_text,
    format_json,
    format_location_text,
)

DEFAULT_CONFIG = "config.yaml"


def main(argv: list[str] | None = None, client=None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherview",
        description="City weather, forecasts and favourites",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Current weather and forecast for a city")
    weather_p.add_argument("city", nargs="+", help="City name")
    weather_p.add_argument("--json", action="store_true", help="Print JSON")

    # location
    loc_p = sub.add_parser("location", help="Weather at a coordinate")
    loc_p.add_argument("--lat", type=float, default=None)
    loc_p.add_argument("--lon", type=float, default=None)
    loc_p.add_argument("--json", action="store_true", help="Print JSON")

    # favorites list / add / remove
    fav_p = sub.add_parser("favorites", help="Favourite cities")
    fav_sub = fav_p.add_subparsers(dest="favorites_command")
    list_p = fav_sub.add_parser("list", help="Show favourites with current weather")
    list_p.add_argument("--json", action="store_true", help="Print JSON")
    add_p = fav_sub.add_parser("add", help="Add a favourite")
    add_p.add_argument("city", nargs="+")
    rm_p = fav_sub.add_parser("remove", help="Remove a favourite")
    rm_p.add_argument("city", nargs="+")

    # theme show / dark / units / animation
    theme_p = sub.add_parser("theme", help="Display preferences")
    theme_sub = theme_p.add_subparsers(dest="theme_command")
    theme_sub.add_parser("show", help="Show current preferences")
    dark_p = theme_sub.add_parser("dark", help="Dark mode on/off")
    dark_p.add_argument("state", choices=["on", "off"])
    units_p = theme_sub.add_parser("units", help="Unit system")
    units_p.add_argument("units", choices=[u.value for u in Units])
    anim_p = theme_sub.add_parser("animation", help="Background animation on/off")
    anim_p.add_argument("state", choices=["on", "off"])

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    show_p = config_sub.add_parser("show", help="Display current config")
    show_p.add_argument("key", nargs="?", help="Dotted key, e.g. display.units")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.command == "config":
        return _cmd_config(config, args)

    db_path = args.db or config.storage.db_path
    with open_database(db_path) as conn:
        pipeline = ScreenPipeline(config, conn, client=client)
        if args.command == "weather":
            return _cmd_weather(pipeline, args)
        elif args.command == "location":
            return _cmd_location(pipeline, args)
        elif args.command == "favorites":
            return _cmd_favorites(pipeline, args)
        elif args.command == "theme":
            return _cmd_theme(pipeline, args)

    parser.print_help()
    return 1


def _cmd_weather(pipeline: ScreenPipeline, args) -> int:
    view = pipeline.home(" ".join(args.city))
    pipeline.save_theme()
    print(format_json(view) if args.json else format_home_text(view))
    return 0 if view.current.has_data else 1


def _cmd_location(pipeline: ScreenPipeline, args) -> int:
    coords = None
    if args.lat is not None and args.lon is not None:
        coords = Coordinates(latitude=args.lat, longitude=args.lon)
    view = pipeline.location(coords)
    pipeline.save_theme()
    print(format_json(view) if args.json else format_location_text(view))
    return 0 if view.current.has_data else 1


def _cmd_favorites(pipeline: ScreenPipeline, args) -> int:
    if args.favorites_command == "list":
        view = pipeline.favorites_screen()
        print(format_json(view) if args.json else format_favorites_text(view))
        return 0
    elif args.favorites_command in ("add", "remove"):
        city = " ".join(args.city).strip()
        if args.favorites_command == "add":
            change = pipeline.favorites.add(city)
            verb = "Added" if change.changed else "Already a favourite:"
        else:
            change = pipeline.favorites.remove(city)
            verb = "Removed" if change.changed else "Not a favourite:"
        print(f"{verb} {city}")
        if not change.persisted:
            print("Warning: change not saved")
            return 1
        return 0
    else:
        print("Use: favorites list | favorites add CITY | favorites remove CITY")
        return 1


def _cmd_theme(pipeline: ScreenPipeline, args) -> int:
    theme = pipeline.theme
    if args.theme_command == "show":
        pass
    elif args.theme_command == "dark":
        if (args.state == "on") != theme.is_dark:
            theme.toggle_dark()
    elif args.theme_command == "units":
        theme.set_units(args.units)
    elif args.theme_command == "animation":
        if (args.state == "on") != theme.background_animation:
            theme.toggle_background_animation()
    else:
        print("Use: theme show | theme dark on|off | theme units metric|imperial "
              "| theme animation on|off")
        return 1

    pipeline.save_theme()
    pref = theme.preference
    print(
        f"Dark mode: {'on' if pref.is_dark else 'off'} | Units: {pref.units} | "
        f"Animation: {'on' if pref.background_animation else 'off'} | "
        f"Accent: {pref.accent_color}"
    )
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        if args.key:
            try:
                print(get_config_value(config, args.key))
            except KeyError as e:
                print(f"Error: {e}")
                return 1
            return 0
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show [KEY]")
    return 1
