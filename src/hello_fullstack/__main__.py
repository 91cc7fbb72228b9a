"""CLI entry-point for hello_fullstack.

Usage:
    python -m hello_fullstack serve [--host HOST] [--port PORT]
    python -m hello_fullstack frontend [--host HOST] [--port PORT] [--backend-url URL]
    python -m hello_fullstack fetch [--backend-url URL] [--text]
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from hello_fullstack import __version__
from hello_fullstack.config import Settings
from hello_fullstack.utils.exit_codes import ExitCode
from hello_fullstack.utils.log import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hello-fullstack",
        description="Greeting Responder and the Presenter that displays it.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    sub = p.add_subparsers(dest="command")

    serve_p = sub.add_parser("serve", help="Run the greeting Responder.")
    serve_p.add_argument("--host", default=None, help="Bind address (default: HOST).")
    serve_p.add_argument("--port", type=int, default=None, help="Port (default: PORT).")

    front_p = sub.add_parser("frontend", help="Run the Presenter page host.")
    front_p.add_argument("--host", default=None, help="Bind address (default: FRONTEND_HOST).")
    front_p.add_argument("--port", type=int, default=None, help="Port (default: FRONTEND_PORT).")
    front_p.add_argument("--backend-url", default=None, help="Responder URL to fetch.")

    fetch_p = sub.add_parser("fetch", help="Mount a Presenter once and print the view.")
    fetch_p.add_argument("--backend-url", default=None, help="Responder URL to fetch.")
    fetch_p.add_argument(
        "--text",
        action="store_true",
        default=False,
        help="Print the bare message instead of the rendered HTML.",
    )
    return p


def _handle_serve(args: argparse.Namespace, cfg: Settings) -> int:
    import uvicorn

    from hello_fullstack.web_api.main import create_app

    if args.host is not None:
        cfg.HOST = args.host
    if args.port is not None:
        cfg.PORT = args.port
    uvicorn.run(create_app(cfg), host=cfg.HOST, port=cfg.PORT)
    return ExitCode.SUCCESS


def _handle_frontend(args: argparse.Namespace, cfg: Settings) -> int:
    import uvicorn

    from hello_fullstack.presenter.app import create_frontend_app

    if args.host is not None:
        cfg.FRONTEND_HOST = args.host
    if args.port is not None:
        cfg.FRONTEND_PORT = args.port
    if args.backend_url is not None:
        cfg.BACKEND_URL = args.backend_url
    uvicorn.run(create_frontend_app(cfg), host=cfg.FRONTEND_HOST, port=cfg.FRONTEND_PORT)
    return ExitCode.SUCCESS


def _handle_fetch(args: argparse.Namespace, cfg: Settings) -> int:
    from hello_fullstack.presenter.view import Presenter

    presenter = Presenter(args.backend_url or cfg.BACKEND_URL)
    asyncio.run(presenter.mount())
    print(presenter.message if args.text else presenter.render())
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = success, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    cfg = Settings()
    configure_logging("DEBUG" if args.verbose else cfg.LOG_LEVEL)

    handlers = {
        "serve": _handle_serve,
        "frontend": _handle_frontend,
        "fetch": _handle_fetch,
    }
    try:
        return handlers[args.command](args, cfg)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
