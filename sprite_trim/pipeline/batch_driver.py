"""
Batch driver
Runs trim_and_clamp over a single file or every matching file of a
directory, one task per file on an injected executor.
"""

import logging
import os
from concurrent.futures import Executor, as_completed
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from ..errors import ConfigurationError
from ..models.work_item import BatchReport, ItemOutcome, WorkItem
from ..services.image_service import ImageService
from .trim_and_clamp import trim_and_clamp

# Load environment variables
load_dotenv()
OUTPUT_SUFFIX = os.getenv("OUTPUT_SUFFIX", "_cropped")
OUTPUT_DIR_NAME = os.getenv("OUTPUT_DIR_NAME", "output")

logger = logging.getLogger(__name__)


def output_name(input_path: Path, suffix: str = OUTPUT_SUFFIX) -> str:
    """The encoder always writes PNG, whatever the input extension was."""
    return f"{input_path.stem}{suffix}.png"


def resolve_output_dir(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    image_service: ImageService = ImageService(),
) -> Path:
    """
    Pick the output directory and create it before any work is dispatched.

    Without an explicit *output_path* this is <input dir>/output for a
    directory input, and <parent of input file>/output for a file input.
    """
    input_path = Path(input_path)
    if output_path is not None:
        output_dir = Path(output_path)
    elif input_path.is_dir():
        output_dir = input_path / OUTPUT_DIR_NAME
    else:
        output_dir = input_path.parent / OUTPUT_DIR_NAME

    try:
        return image_service.ensure_dir(output_dir)
    except OSError as err:
        raise ConfigurationError(f"Cannot create output directory {output_dir}: {err}") from err


class BatchDriver:
    """
    Applies the trim/clamp pipeline to WorkItems.

    The executor is owned by the caller; the driver only submits to it.
    Single-file runs never touch it, so it may be omitted for those.
    Items share no mutable state, so completion order does not matter.
    """

    def __init__(
        self,
        executor: Executor | None = None,
        image_service: ImageService = None,
        pattern: str | None = None,
    ):
        self.executor = executor
        self.image_service = image_service or ImageService()
        self.pattern = pattern

    def plan(self, input_path: str | Path, output_dir: str | Path) -> List[WorkItem]:
        input_path = Path(input_path)
        output_dir = Path(output_dir)

        if input_path.is_dir():
            inputs = self.image_service.list_inputs(input_path, self.pattern)
        elif input_path.is_file():
            inputs = [input_path]
        else:
            raise ConfigurationError(f"Input path does not exist: {input_path}")

        return [WorkItem(input_path=p, output_path=output_dir / output_name(p)) for p in inputs]

    def process(self, item: WorkItem) -> ItemOutcome:
        """Decode, transform, encode.  Errors propagate to the caller."""
        img = self.image_service.load(item.input_path)
        result = trim_and_clamp(img)
        result.path = item.output_path
        self.image_service.save(result)

        height, width = self.image_service.get_image_dimensions(result)
        logger.debug("Wrote %s (%dx%d)", item.output_path, width, height)
        return ItemOutcome(item=item, output_size=(width, height))

    def _process_isolated(self, item: WorkItem) -> ItemOutcome:
        # Per-item fault boundary: a failure becomes an outcome, never a crash
        try:
            return self.process(item)
        except Exception as err:
            logger.error("Failed to process file %s: %s", item.input_path, err)
            return ItemOutcome(item=item, error=err)

    def run_items(self, items: List[WorkItem]) -> BatchReport:
        if self.executor is None:
            raise ConfigurationError("A directory run needs a worker pool")

        report = BatchReport()
        futures = [self.executor.submit(self._process_isolated, item) for item in items]
        for future in as_completed(futures):
            report.add(future.result())
        return report

    def run(self, input_path: str | Path, output_dir: str | Path) -> BatchReport:
        """
        A directory is processed concurrently with per-item isolation.
        A single file is processed directly and its errors are raised.
        """
        input_path = Path(input_path)
        items = self.plan(input_path, output_dir)

        if not input_path.is_dir():
            report = BatchReport()
            report.add(self.process(items[0]))
            return report

        if not items:
            logger.warning("No matching files in %s", input_path)
            return BatchReport()

        logger.info("Processing %d file(s) from %s", len(items), input_path)
        return self.run_items(items)


def log_batch_report(report: BatchReport) -> None:
    """
    Print a summary block of a finished batch.
    """
    print(f"{'='*60}")
    print(f"Processed {report.total} file(s): "
          f"{len(report.succeeded)} succeeded, {len(report.failed)} failed")

    for outcome in report.failed:
        print(f"   FAILED {outcome.item.input_path}: {outcome.error}")

    print(f"{'='*60}")
