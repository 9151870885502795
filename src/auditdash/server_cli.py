"""CLI entry point for the audit dashboard server."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="auditdash-server",
        description="Audit dashboard: health, trends and findings over daily agent reports",
    )
    parser.add_argument("--host", default=None, help="Bind host (default: AUDITDASH_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: AUDITDASH_PORT or 3000)")
    parser.add_argument("--data-dir", default=None, help="Directory holding YYYY-MM-DD report folders")
    parser.add_argument(
        "--pretty-logs",
        action="store_true",
        help="Colored console logs instead of JSON",
    )
    args = parser.parse_args(argv)

    # Settings are read when auditdash.main is imported by uvicorn
    if args.data_dir:
        os.environ["AUDITDASH_DATA_DIR"] = args.data_dir
    if args.pretty_logs:
        os.environ["AUDITDASH_JSON_LOGS"] = "0"

    import uvicorn

    from auditdash.config import Settings

    settings = Settings()
    uvicorn.run(
        "auditdash.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
