import os
import logging
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor

from .. import __version__
from ..errors import ConfigurationError, SpriteTrimError
from ..pipeline.batch_driver import BatchDriver, log_batch_report, resolve_output_dir

logger = logging.getLogger(__name__)


def default_num_threads() -> int:
    env_value = os.getenv("NUM_THREADS")
    if env_value:
        try:
            return int(env_value)
        except ValueError as err:
            raise ConfigurationError(f"NUM_THREADS must be an integer, got {env_value!r}") from err
    return os.cpu_count() or 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sprite-trim",
        description="Trim transparent edges and clamp the aspect ratio of PNG images.",
    )
    ap.add_argument("-i", "--input-path", required=True,
                    help="Input image file or directory path")
    ap.add_argument("-o", "--output-path", default=None,
                    help="Output directory path (default: <input>/output)")
    ap.add_argument("-n", "--num-threads", type=int, default=None,
                    help="Number of worker threads (default: NUM_THREADS or CPU count)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def setup_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown LOG_LEVEL {level!r}")

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def run(args: argparse.Namespace) -> int:
    num_threads = args.num_threads if args.num_threads is not None else default_num_threads()
    if num_threads < 1:
        raise ConfigurationError(f"Number of threads must be at least 1, got {num_threads}")

    if not os.path.exists(args.input_path):
        raise ConfigurationError(f"Input path does not exist: {args.input_path}")

    # Output directory exists before any worker starts
    output_dir = resolve_output_dir(args.input_path, args.output_path)
    logger.info("Writing results to %s using %d thread(s)", output_dir, num_threads)

    if not os.path.isdir(args.input_path):
        BatchDriver().run(args.input_path, output_dir)
        return 0

    with ThreadPoolExecutor(max_workers=num_threads) as executor:
        report = BatchDriver(executor).run(args.input_path, output_dir)
    log_batch_report(report)

    # Per-item failures never change the exit code
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging()
        return run(args)
    except SpriteTrimError as err:
        logger.error("%s", err)
        return 1


if __name__ == "__main__":
    sys.exit(main())
