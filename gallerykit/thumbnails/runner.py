"""
Thumbnail pipeline: decode -> scale -> encode for every catalog entry.

Work runs in a bounded process pool. Results flow back to the parent, which
alone owns the success/failure counters. A failed image is logged and
counted; it never stops the batch.
"""
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Set, Type
from concurrent.futures import Executor, Future, ProcessPoolExecutor, FIRST_COMPLETED, wait
import os
import signal
import threading
import time
import logging

from ..core.extensions import thumbnail_name
from ..core.interfaces import (
    EncoderSettings,
    ImageDimensions,
    IPipelineRunner,
    RunSummary,
    ThumbnailJob,
    ThumbnailPlan,
    ThumbnailResult,
)
from ..image.codec import ImageDecoder, ImageEncoder
from ..image.scaler import ImageScaler
from .planner import source_directory

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ThumbnailResult, RunSummary], None]


def _ignore_interrupts() -> None:
    """Pool initializer: Ctrl-C is handled by the parent as a cooperative stop."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def generate_thumbnail(job: ThumbnailJob) -> ThumbnailResult:
    """Worker function for parallel processing (must be top-level for pickling)."""
    try:
        img = ImageDecoder(job.auto_orient).decode(job.source)
        thumb = ImageScaler().scale(img, job.size)
        ImageEncoder(job.encoder).encode(thumb, job.destination)
        return ThumbnailResult(
            job.catalog_path,
            job.destination,
            ok=True,
            dimensions=ImageDimensions(thumb.width, thumb.height),
        )
    except Exception as e:
        return ThumbnailResult(job.catalog_path, job.destination, ok=False, error=str(e))


class PipelineRunner(IPipelineRunner):
    """
    Runs thumbnail jobs over a whole catalog with best-effort semantics.

    Example:
        runner = PipelineRunner(root, root / "thumb", size=154)
        summary = runner.run(paths, plan)
        print(f"{summary.succeeded} ok, {summary.failed} failed")

    ``stop()`` may be called from another thread or a signal handler: no
    further jobs are dispatched, jobs already in flight finish, and ``run``
    returns the partial counts. A stopped runner stays stopped.
    """

    def __init__(
        self,
        root: Path,
        thumbnail_root: Path,
        size: int,
        encoder: Optional[EncoderSettings] = None,
        auto_orient: bool = True,
        max_workers: Optional[int] = None,
        progress: Optional[ProgressCallback] = None,
        executor_class: Type[Executor] = ProcessPoolExecutor,
    ):
        self.root = Path(root)
        self.thumbnail_root = Path(thumbnail_root)
        self.size = size
        self.encoder = encoder or EncoderSettings()
        self.auto_orient = auto_orient
        self.max_workers = max_workers
        self.progress = progress
        self.executor_class = executor_class
        self._stop_event = threading.Event()

    @classmethod
    def from_config(cls, config, **kwargs) -> "PipelineRunner":
        return cls(
            root=config.root,
            thumbnail_root=config.thumbnail_root,
            size=config.thumbnail_size,
            encoder=config.encoder_settings,
            auto_orient=config.auto_orient,
            max_workers=config.max_workers or None,
            **kwargs,
        )

    def stop(self) -> None:
        if not self._stop_event.is_set():
            logger.warning("Stop requested, finishing images in progress")
        self._stop_event.set()

    def build_jobs(self, catalog_paths: Sequence[str], plan: ThumbnailPlan) -> List[ThumbnailJob]:
        """
        Resolve source and destination paths for every catalog entry.

        No two jobs share a destination file. When one is already claimed in
        this run (``x.gif`` and ``x.png`` both become ``x.png``), the later
        entry gets a ``_N`` suffix before the extension.
        """
        jobs = []
        claimed: Set[Path] = set()
        for path in catalog_paths:
            destination_dir = self.thumbnail_root / plan[source_directory(path)]
            destination = self._claim(destination_dir / thumbnail_name(Path(path).name), claimed)
            jobs.append(ThumbnailJob(
                catalog_path=path,
                source=self.root / path,
                destination=destination,
                size=self.size,
                encoder=self.encoder,
                auto_orient=self.auto_orient,
            ))
        return jobs

    @staticmethod
    def _claim(destination: Path, claimed: Set[Path]) -> Path:
        candidate = destination
        counter = 1
        while candidate in claimed:
            candidate = destination.with_name(f"{destination.stem}_{counter}{destination.suffix}")
            counter += 1
        if candidate != destination:
            logger.warning(f"Thumbnail {destination} already claimed in this run, writing {candidate.name}")
        claimed.add(candidate)
        return candidate

    def run(self, catalog_paths: Sequence[str], plan: ThumbnailPlan) -> RunSummary:
        """
        Process every catalog entry once.

        Args:
            catalog_paths: Root-relative image paths, in catalog order
            plan: Destination directories, already created on disk

        Returns:
            RunSummary with success/failure counts
        """
        jobs = self.build_jobs(catalog_paths, plan)
        summary = RunSummary(total=len(jobs))
        if not jobs:
            logger.warning("Catalog is empty, no thumbnails to generate")
            return summary

        start_time = time.time()
        workers = self._worker_count(len(jobs))
        logger.info(f"Generating {len(jobs)} thumbnails with {workers} workers, please wait...")

        pending = iter(jobs)
        in_flight: Dict[Future, ThumbnailJob] = {}

        with self.executor_class(max_workers=workers, **self._executor_options()) as executor:

            def dispatch() -> None:
                if self._stop_event.is_set():
                    return
                job = next(pending, None)
                if job is not None:
                    in_flight[executor.submit(generate_thumbnail, job)] = job

            for _ in range(workers):
                dispatch()

            while in_flight:
                done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                for future in done:
                    job = in_flight.pop(future)
                    try:
                        result = future.result()
                    except Exception as e:
                        result = ThumbnailResult(job.catalog_path, job.destination, ok=False, error=f"worker error: {e}")

                    self._record(summary, result)
                    dispatch()

        summary.stopped = self._stop_event.is_set() and summary.skipped > 0
        self._log_summary(summary, time.time() - start_time)
        return summary

    def _record(self, summary: RunSummary, result: ThumbnailResult) -> None:
        if result.ok:
            summary.succeeded += 1
            logger.info(f"Generated: {result.catalog_path}")
        else:
            summary.failed += 1
            summary.failures.append((result.catalog_path, result.error or "unknown error"))
            logger.error(f"FAILED: {result.catalog_path} ({result.error})")

        processed = summary.processed
        if processed % 100 == 0 or processed == summary.total:
            logger.info(f"Progress: {processed}/{summary.total} ({processed / summary.total * 100:.1f}%)")

        if self.progress is not None:
            self.progress(result, summary)

    def _worker_count(self, total: int) -> int:
        return max(1, min(self.max_workers or os.cpu_count() or 1, total))

    def _executor_options(self) -> dict:
        if issubclass(self.executor_class, ProcessPoolExecutor):
            return {"initializer": _ignore_interrupts}
        return {}

    def _log_summary(self, summary: RunSummary, elapsed: float) -> None:
        if summary.stopped:
            logger.warning(
                f"Thumbnail generation stopped after {summary.processed}/{summary.total} images, "
                f"{summary.skipped} not attempted."
            )
        else:
            logger.info(f"Thumbnail generation complete in {elapsed:.2f}s.")
        logger.info(f"{summary.succeeded} generated successfully and {summary.failed} failed.")
