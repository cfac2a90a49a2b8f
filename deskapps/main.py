"""Main entry point for the desk console applications."""

import argparse
import sys
from pathlib import Path

from deskapps.cli import GradeMenu, HotelMenu
from deskapps.config import Settings, configure_logging, get_logger, settings
from deskapps.services import GradebookService, HotelContext

logger = get_logger(__name__)

APPS = ("hotel", "grades")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deskapps",
        description="Hotel reservation system and student grade tracker",
    )
    parser.add_argument("app", choices=APPS, help="Application to start")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the data files (default: STORAGE_DATA_DIR or current directory)",
    )
    return parser


def run_app(app: str, app_settings: Settings) -> int:
    """Load the data of one application and run its menu.

    Args:
        app: "hotel" or "grades"
        app_settings: Settings to run with

    Returns:
        Exit code of the menu loop
    """
    storage = app_settings.storage
    if app == "hotel":
        context = HotelContext.load(storage)
        return HotelMenu(context, app_settings.hotel).run()

    gradebook = GradebookService.load(storage.students_path)
    return GradeMenu(gradebook).run()


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and run the chosen application.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    app_settings = settings
    if args.data_dir is not None:
        app_settings = settings.with_data_dir(args.data_dir)

    configure_logging(app_settings.logging)
    logger.info(
        "Starting desk application",
        app=args.app,
        environment=app_settings.environment,
        data_dir=str(app_settings.storage.data_dir),
    )

    try:
        return run_app(args.app, app_settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user", app=args.app)
        return 130
    except Exception as e:
        logger.error(
            "Fatal error in main application",
            app=args.app,
            error=str(e),
            exc_info=True,
        )
        return 1


def run() -> None:
    sys.exit(main())


def run_hotel() -> None:
    sys.exit(main(["hotel", *sys.argv[1:]]))


def run_grades() -> None:
    sys.exit(main(["grades", *sys.argv[1:]]))


if __name__ == "__main__":
    run()
