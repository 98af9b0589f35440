"""
CLI: Harmonica -> markdown (one-way sync).

Variables de entorno:
  - HARMONICA_API_KEY  (obligatoria para sincronizar)
  - HARMONICA_API_URL  (opcional, default https://app.harmonica.chat)

Ejecución:
  harmonica-sync                     # usa ./harmonica.config.json
  harmonica-sync --config path/to    # config alternativa
  harmonica-sync --init              # genera config + template inicial
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from loguru import logger

from harmonica_sync.application.services.config_loader import load_sync_config
from harmonica_sync.application.services.template_renderer import bundled_template_path
from harmonica_sync.application.use_cases.init_use_cases import ProjectInitializer
from harmonica_sync.application.use_cases.sync_use_cases import sync
from harmonica_sync.core.config import Settings
from harmonica_sync.core.logging import configure_logging
from harmonica_sync.shared.constants.session_constants import (
    DEFAULT_API_URL,
    DEFAULT_CONFIG_FILENAME,
)
from harmonica_sync.shared.exceptions.base import AppException

EPILOG = f"""
Environment variables:
  HARMONICA_API_KEY  (required)  API key from Harmonica dashboard
  HARMONICA_API_URL  (optional)  defaults to {DEFAULT_API_URL}
"""

NEXT_STEPS = f"""
Setup complete! Next steps:

  1. Edit {DEFAULT_CONFIG_FILENAME} with your search queries
  2. Set your API key: export HARMONICA_API_KEY=hm_live_...
  3. Run: harmonica-sync
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harmonica-sync",
        description="Sync Harmonica sessions to markdown files",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=DEFAULT_CONFIG_FILENAME,
        help=f"Path to the sync config (default: ./{DEFAULT_CONFIG_FILENAME})",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Generate a starter config and session template in the current directory",
    )
    return parser


def run_init(target_dir: Path) -> None:
    ProjectInitializer(target_dir, bundled_template_path()).run()
    print(NEXT_STEPS)


def run_sync(config_arg: str, settings: Settings) -> None:
    config_path = Path(config_arg).resolve()
    config = load_sync_config(config_path)
    sync(config, config_path.parent, settings=settings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # .env del directorio actual, sin pisar variables ya definidas
    load_dotenv(Path.cwd() / ".env", override=False)
    settings = Settings()

    try:
        configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
        if args.init:
            run_init(Path.cwd())
        else:
            run_sync(args.config, settings)
    except AppException as e:
        logger.error(e.message)
        hint = e.details.get("hint")
        if hint:
            logger.error(hint)
        return e.exit_code
    except Exception as e:
        logger.exception(f"Sync failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
