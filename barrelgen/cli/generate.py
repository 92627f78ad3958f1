"""
Command-line entry point for auto-barrel.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from barrelgen import __version__
from barrelgen.config import BarrelConfig, BarrelConfigError
from barrelgen.ignore import IgnoreFileLoader, init_ignore_file
from barrelgen.utils import configure_logging, get_logger
from barrelgen.walker import BarrelGenerator

logger = get_logger("auto-barrel")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='auto-barrel',
        description='Write a re-export aggregator into every directory of a source tree'
    )
    parser.add_argument(
        'root',
        nargs='?',
        default='.',
        help='Directory to start from (default: current directory)'
    )
    parser.add_argument(
        '--sort',
        action='store_true',
        default=None,
        help='Sort entries by name instead of using directory listing order'
    )
    parser.add_argument(
        '--init',
        action='store_true',
        help='Create a starter ignore file in ROOT and exit'
    )
    parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='With --init, overwrite an existing ignore file'
    )
    parser.add_argument(
        '--check',
        action='store_true',
        help='Validate every ignore file under ROOT without writing anything'
    )
    parser.add_argument(
        '--log-level',
        help='Log level (TRACE, DEBUG, INFO, WARNING, ERROR); default from BARREL_LOG_LEVEL'
    )
    parser.add_argument(
        '--log-file',
        help='Also write logs to this rotating file'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def check_ignore_files(root: Path, config: BarrelConfig) -> int:
    """Log problems in every rule file; 1 if any has errors"""
    loader = IgnoreFileLoader(config.ignore_filename)
    files = loader.find_ignore_files(root)
    failed = False

    for file_path in files:
        report = loader.check_file(file_path)
        for problem in report.problems:
            log = logger.error if problem.is_error else logger.warning
            log(f"{file_path}:{problem.line}: {problem.pattern}: {problem.message}")
        failed = failed or bool(report.errors)
        logger.info(f"{file_path}: {len(report.patterns)} pattern(s) in effect")

    logger.info(f"Checked {len(files)} {config.ignore_filename} file(s)")
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.force and not args.init:
        parser.error('--force is only valid with --init')

    configure_logging(log_level=args.log_level, log_file=args.log_file)

    try:
        config = BarrelConfig.from_env().with_overrides(sort_entries=args.sort)
    except BarrelConfigError as e:
        parser.error(str(e))

    root = Path(args.root)
    if not root.is_dir():
        logger.error(f"{root} is not a directory")
        return 1

    if args.init:
        if init_ignore_file(root, force=args.force, ignore_filename=config.ignore_filename):
            logger.info(f"Created {root / config.ignore_filename}")
        else:
            logger.warning(f"{root / config.ignore_filename} already exists (use --force to overwrite)")
        return 0

    if args.check:
        return check_ignore_files(root, config)

    generator = BarrelGenerator(config)
    try:
        generator.run(args.root)
    except OSError as e:
        logger.error(f"Barrel generation aborted: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
