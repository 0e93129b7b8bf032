from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn

from filevault.config import ConfigError, load_config
from filevault.errors import StorageError
from filevault.util.logging import configure_logging

from .app import create_app


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="filevault", description="Serve a single confined storage directory over HTTP.")
    ap.add_argument("--config", type=Path, default=None, help="YAML or JSON config file")
    ap.add_argument("--root", dest="storage_root", default=None, help="storage directory")
    ap.add_argument("--host", default=None)
    ap.add_argument("--port", type=int, default=None)
    ap.add_argument("--log-file", dest="log_path", type=Path, default=None)
    ap.add_argument("--log-level", dest="log_level", default=None)
    args = ap.parse_args(argv)

    try:
        config = load_config(
            args.config,
            overrides={
                "storage_root": args.storage_root,
                "host": args.host,
                "port": args.port,
                "log_path": args.log_path,
                "log_level": args.log_level,
            },
        )
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger = configure_logging(level=config.log_level, log_path=config.log_path)
    try:
        app = create_app(config)
    except StorageError as e:
        logger.critical("Error creating base directory: %s", e)
        return 1

    logger.info("Server running at http://%s:%d/", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
