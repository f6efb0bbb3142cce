#!/usr/bin/env python3
"""
CLI da WeatherView

Uso:
    python weather_cli.py set-key <API_KEY>
    python weather_cli.py search "Bogotá"
    python weather_cli.py locate
    python weather_cli.py watch [--location "Bogotá"]

`watch` mantém a view aberta com refresh automático e imprime cada
mudança de estado como JSON até Ctrl+C.
"""
import argparse
import asyncio
import json
import sys

from application.dtos.responses import ViewState
from application.services.weather_view import WeatherView
from infrastructure.adapters.input.weather_view_factory import create_weather_view
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Clima atual e 24h antes/depois via Visual Crossing."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    set_key = subparsers.add_parser("set-key", help="Salva a API key do Visual Crossing.")
    set_key.add_argument("key")

    search = subparsers.add_parser("search", help="Busca por cidade/endereço.")
    search.add_argument("location")

    subparsers.add_parser("locate", help="Busca pela posição do dispositivo.")

    watch = subparsers.add_parser("watch", help="Mantém a view aberta com refresh automático.")
    watch.add_argument("--location", default=None, help="Localização inicial (opcional).")
    watch.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Intervalo de refresh em segundos (padrão: REFRESH_INTERVAL_SECONDS).",
    )

    return parser.parse_args(argv)


def print_state(state: ViewState) -> None:
    if state.loading:
        return
    print(json.dumps(state.to_api_response(), ensure_ascii=False, indent=2))


async def run(args: argparse.Namespace) -> int:
    view_kwargs = {}
    if getattr(args, "interval", None):
        view_kwargs["refresh_interval_seconds"] = args.interval

    view: WeatherView = create_weather_view(**view_kwargs)
    view.subscribe(print_state)

    try:
        if args.command == "set-key":
            await view.save_api_key(args.key)
        elif args.command == "search":
            await view.search(args.location)
        elif args.command == "locate":
            await view.use_my_location()
        elif args.command == "watch":
            await view.initialize()
            if args.location:
                await view.search(args.location)
            await asyncio.Event().wait()
    finally:
        await view.close()
        await get_aiohttp_session_manager().close()

    return 1 if view.error else 0


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
