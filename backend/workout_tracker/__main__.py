"""
Entry point for running the server with `python -m workout_tracker`
or the `workout-tracker` console script.
"""
import argparse
import logging
import os

import uvicorn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workout-tracker",
        description="Server for the workout-tracker application",
    )
    parser.add_argument("--host", default="127.0.0.1", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--db", help="path to the sqlite database (overrides DATABASE_URL)")
    parser.add_argument("--static-files", help="directory with the built frontend to serve")
    parser.add_argument("--log-level", help="log level (overrides LOG_LEVEL)")
    return parser


def apply_overrides(args: argparse.Namespace) -> None:
    """Push command line options into the environment read by Settings."""
    if args.db:
        os.environ["DATABASE_URL"] = f"sqlite:///{args.db}"
    if args.static_files:
        os.environ["STATIC_FILES_DIR"] = args.static_files
    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level.upper()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    apply_overrides(args)

    # imported late so the overrides above are seen by get_settings()
    from workout_tracker.settings import get_settings
    settings = get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Ctrl-C / SIGTERM: uvicorn stops accepting, drains in-flight requests,
    # then runs the lifespan shutdown which releases the database.
    uvicorn.run(
        "workout_tracker.main:app",
        host=args.host,
        port=args.port,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
