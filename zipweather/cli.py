"""CLI entry point for the zip code weather service."""

import argparse
import json
import logging

from dotenv import load_dotenv

from zipweather.config.defaults import API_KEY_ENV
from zipweather.config.loader import load_config, static_dir
from zipweather.models.errors import TransformError, WeatherServiceError
from zipweather.pipeline.weather_service import WeatherService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="zipweather",
        description="Weather forecast lookup by postal/zip code",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Print the forecast for a zip code")
    lookup_p.add_argument("zipcode")

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
    # httpx logs full request URLs, which carry the geocoding key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    load_dotenv()
    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "lookup":
        return _cmd_lookup(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    if not config.geocoding.api_key:
        print(f"Error: {API_KEY_ENV} not set (environment, .env or config)")
        return 1

    import uvicorn

    from zipweather.api import create_app

    service = WeatherService.from_config(config)
    app = create_app(service, static_dir(config))
    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("listening on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
    return 0


def _cmd_lookup(config, args) -> int:
    service = WeatherService.from_config(config)
    try:
        display = service.lookup(args.zipcode)
    except (WeatherServiceError, TransformError) as e:
        print(f"Error: {e}")
        return 1
    print(json.dumps(display.to_dict(), indent=2))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        data = config.model_dump(mode="json")
        if data["geocoding"]["api_key"]:
            data["geocoding"]["api_key"] = "***"
        print(json.dumps(data, indent=2))
        return 0
    print("Use: config show")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
