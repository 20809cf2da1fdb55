#!/usr/bin/env python3
"""
Icon pipeline - renders every width of a platform profile into a sink.

A run decodes the source image, resolves the profile to its widths,
renders each width to PNG and stores the results in a directory or a zip
archive. Output order always follows the size catalog, also when the
renders run on a worker pool; only the calling thread writes to the sink.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional

from constants import DEFAULT_PROFILE
from errors import AppIconizerError, CancelledError
from icon_render import load_source_image, render
from icon_sinks import create_sink
from icon_sizes import normalize_profile, resolve_sizes


@dataclass(frozen=True)
class RunRequest:
    """Everything needed for one invocation."""
    source: Any
    target: Optional[Any] = None
    profile: Optional[str] = DEFAULT_PROFILE
    archive: bool = False


@dataclass(frozen=True)
class RunConfig:
    """Startup configuration, passed explicitly into each run.

    Fields:
        workers: Number of render threads. 1 renders sequentially.
        clock: Returns the timestamp used to name the output.
        report: Receives one progress line per rendition.
    """
    workers: int = 1
    clock: Callable[[], datetime] = datetime.now
    report: Callable[[str], Any] = print


@dataclass
class RunResult:
    output_path: Optional[Path] = None
    renditions: List[str] = field(default_factory=list)
    error: Optional[AppIconizerError] = None

    @property
    def ok(self):
        return self.error is None


def default_workers():
    return os.cpu_count() or 1


def target_directory(request):
    """Explicit target if given, otherwise the directory holding the source."""
    if request.target:
        return Path(request.target)
    return Path(request.source).parent


def _check_cancelled(cancel, width):
    if cancel is not None and cancel.is_set():
        raise CancelledError("Run cancelled", width=width)


def run_pipeline(request, config=None, cancel=None):
    """
    Execute one run and return its RunResult.

    Args:
        request: RunRequest describing source, target, profile and packaging
        config: RunConfig; defaults to sequential rendering with print output
        cancel: Optional threading.Event checked before each rendition

    Raises:
        AppIconizerError subclass on any failure. Errors raised after the
        sink was opened carry `output_path` and the `written` entries, since
        partial output may remain on disk.
    """
    config = config or RunConfig()

    image = load_source_image(request.source)

    profile = normalize_profile(request.profile)
    sizes = resolve_sizes(profile)

    sink = create_sink(request.archive)
    destination = sink.destination_for(target_directory(request), config.clock())

    # Nothing is created when the run is cancelled before it starts
    _check_cancelled(cancel, None)

    executor = None
    if config.workers > 1 and len(sizes) > 1:
        executor = ThreadPoolExecutor(max_workers=config.workers)

    width = None
    opened = False
    try:
        with sink.open(destination):
            opened = True
            pending = None
            if executor is not None:
                pending = [executor.submit(render, image, size) for size in sizes]

            for index, width in enumerate(sizes):
                _check_cancelled(cancel, width)
                if pending is not None:
                    filename, data = pending[index].result()
                else:
                    filename, data = render(image, width)
                sink.write(filename, data)
                config.report(f"created {filename}")
            width = None
    except AppIconizerError as e:
        if e.source is None:
            e.source = Path(request.source)
        if e.width is None:
            e.width = width
        if opened:
            e.output_path = sink.destination
            e.written = list(sink.written)
        raise
    finally:
        if executor is not None:
            executor.shutdown(wait=True, cancel_futures=True)

    config.report("***Done***")
    return RunResult(output_path=destination, renditions=list(sink.written))


def generate_icons(source, target=None, profile=DEFAULT_PROFILE, archive=False, config=None, cancel=None):
    """
    Generate all icon renditions for `source`.

    Never raises for expected failures; inspect `RunResult.ok` and
    `RunResult.error` instead. On failure `renditions` lists what was
    already written to `output_path`.
    """
    request = RunRequest(source=source, target=target, profile=profile, archive=archive)
    try:
        return run_pipeline(request, config=config, cancel=cancel)
    except AppIconizerError as e:
        return RunResult(output_path=e.output_path, renditions=list(e.written), error=e)
