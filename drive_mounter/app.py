import sys
import logging
import argparse
from .config import Preferences, load_config
from .services.actions import run_all
from .services.errors import MounterError
from .utils import setup_logging

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drive-mounter",
        description="Pick a partition and mount it, or unmount it if it is already mounted"
    )
    parser.add_argument(
        "--config", "-c", metavar="PATH", help="TOML configuration file (default: ~/.config/drive-mounter/config.toml)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    all_parser = subparsers.add_parser("all", help="Choose from all partitions")
    all_parser.add_argument(
        "--no-filter", action="store_true", help="Also offer partitions mounted on /, /boot or /home"
    )
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except MounterError as e:
        setup_logging()
        logger.error(str(e))
        sys.exit(1)

    setup_logging("DEBUG" if args.verbose else config.get('LOG_LEVEL', 'INFO'))
    preferences = Preferences(config)

    try:
        if args.command == "all":
            action = run_all(args.no_filter, preferences)
            logger.debug(f"Finished with action: {action.value}")
    except MounterError as e:
        logger.error(str(e))
        sys.exit(1)

    return 0

if __name__ == "__main__":
    sys.exit(main())
