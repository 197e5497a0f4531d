from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from .config import AppConfig, load_config
from .feed import FeedClient
from .formatter import item_from_error, render_items
from .pipeline import run_lookup

CONFIG_ENV = "SE_LOOKUP_CONFIG"
LOG_LEVEL_ENV = "SE_LOOKUP_LOG_LEVEL"

LOGGER = logging.getLogger("evolution_lookup")


def _load_env_files(config_path: Path | None) -> None:
    """Load environment variables from .env files."""

    # Load default .env in current working directory if present
    load_dotenv(override=False)

    # Load .env placed next to the config file if it exists
    if config_path is not None:
        config_env = config_path.parent / ".env"
        if config_env.exists():
            load_dotenv(dotenv_path=config_env, override=False)


def _resolve_config() -> AppConfig:
    _load_env_files(None)
    raw_path = os.environ.get(CONFIG_ENV)
    if not raw_path:
        config = AppConfig()
    else:
        config_path = Path(raw_path).expanduser().resolve()
        _load_env_files(config_path)
        config = load_config(config_path)

    level_override = os.environ.get(LOG_LEVEL_ENV)
    if level_override:
        config = AppConfig.model_validate({**config.model_dump(), "log_level": level_override})
    return config


def build_query(argv: Sequence[str]) -> str:
    return " ".join(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the lookup results for the query given as arguments.

    Every argument is query text, so there are no command line options;
    configuration comes from ``SE_LOOKUP_CONFIG`` and ``.env`` files. The
    exit code is 0 even when the lookup fails, because the failure is
    reported as an item in the printed document.
    """

    query = build_query(sys.argv[1:] if argv is None else argv)

    try:
        config = _resolve_config()
        logging.basicConfig(
            level=getattr(logging, config.log_level),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        with FeedClient(config) as client:
            items = run_lookup(query, client.fetch_catalog, config)
    except Exception as exc:
        LOGGER.exception("Unexpected failure while looking up proposals")
        items = [item_from_error(exc)]

    print(render_items(items))
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
