"""Rendering drivers: serial, streamed parallel and batch parallel.

Every pixel is independent, so the image is split into contiguous ranges
of row-major pixel indices, one per worker. Workers only read the camera
and world, and the canvas is written by a single consumer.

Two parallel backends are provided:

- ``"thread"``: one worker thread per range pushes (x, y, color) results
  through a bounded ``PixelChannel`` to the consumer, which yields them as
  they arrive (``stream_pixels``). Closing the stream closes the channel,
  and workers blocked on a full channel stop at their next send.
- ``"process"``: each range is rendered in a process pool and returned as
  a whole chunk. The scene is pickled to each worker, which sidesteps the
  GIL for CPU-bound tracing.

Both produce images identical to the serial ``render``.

Example:
    >>> import math
    >>> from src.whitted.camera.camera import Camera
    >>> from src.whitted.core.renderer import RenderSettings, render_parallel
    >>> from src.whitted.scene.scenes import default_world
    >>> camera = Camera(11, 11, math.pi / 2)
    >>> canvas = render_parallel(camera, default_world(), RenderSettings(workers=4))
    >>> canvas.width
    11
"""

from __future__ import annotations

import logging
import os
import queue
import threading
import time
from collections.abc import Callable, Iterator
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from contextlib import closing
from dataclasses import dataclass, field
from typing import NamedTuple

from src.whitted.camera.camera import Camera
from src.whitted.core.canvas import Canvas
from src.whitted.core.tuples import Color
from src.whitted.scene.world import MAX_REFLECTIONS, World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (completed_pixels, total_pixels); returning False cancels
ProgressCallback = Callable[[int, int], "bool | None"]

BACKENDS = ("thread", "process")

# How often a blocked producer re-checks whether the channel was closed
_POLL_INTERVAL = 0.05


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class RenderSettings:
    """Configuration for a parallel render.

    Attributes:
        max_depth: Recursion budget for reflected and refracted rays.
        workers: Number of worker threads or processes.
        channel_capacity: Maximum number of results buffered between the
            workers and the consumer (thread backend).
        backend: ``"thread"`` (streamed) or ``"process"`` (batch chunks).
    """

    max_depth: int = MAX_REFLECTIONS
    workers: int = field(default_factory=lambda: os.cpu_count() or 1)
    channel_capacity: int = 1024
    backend: str = "thread"

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.channel_capacity < 1:
            raise ValueError(f"channel_capacity must be at least 1, got {self.channel_capacity}")
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}, got {self.backend!r}")


class PixelResult(NamedTuple):
    """One shaded pixel."""

    x: int
    y: int
    color: Color


# =============================================================================
# Channel
# =============================================================================


class ChannelClosed(Exception):
    """Raised by ``PixelChannel.send`` once the consumer has closed the channel."""


class PixelChannel:
    """Bounded many-producer, single-consumer channel.

    ``send`` blocks while the channel is full. Once ``close`` is called,
    pending and future sends raise ChannelClosed, which producers treat
    as a request to stop.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Channel capacity must be at least 1, got {capacity}")
        self._queue: queue.Queue = queue.Queue(maxsize=capacity)
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, item: object) -> None:
        """Enqueue an item, waiting for space.

        Raises:
            ChannelClosed: If the channel is (or becomes) closed.
        """
        while True:
            if self._closed.is_set():
                raise ChannelClosed()
            try:
                self._queue.put(item, timeout=_POLL_INTERVAL)
                return
            except queue.Full:
                continue

    def receive(self, timeout: float | None = None) -> object:
        """Dequeue the next item.

        Raises:
            queue.Empty: If ``timeout`` elapses with nothing to receive.
        """
        return self._queue.get(timeout=timeout)

    def close(self) -> None:
        """Stop accepting items. Buffered items are discarded."""
        self._closed.set()
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break


@dataclass(frozen=True)
class _WorkerDone:
    """End-of-stream marker sent by each producer."""

    error: BaseException | None = None


# =============================================================================
# Work splitting and per-worker loops
# =============================================================================


def partition(total: int, workers: int) -> list[range]:
    """Split ``range(total)`` into at most ``workers`` contiguous chunks.

    Chunk sizes differ by at most one, and empty chunks are dropped.

    Raises:
        ValueError: If total is negative or workers is less than 1.
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    base, extra = divmod(total, workers)
    chunks = []
    start = 0
    for i in range(workers):
        size = base + (1 if i < extra else 0)
        if size:
            chunks.append(range(start, start + size))
        start += size
    return chunks


def render_pixels(
    camera: Camera,
    world: World,
    pixels: range,
    max_depth: int = MAX_REFLECTIONS,
) -> Iterator[PixelResult]:
    """Shade a contiguous range of row-major pixel indices.

    Args:
        camera: Camera generating primary rays.
        world: Scene to trace.
        pixels: Indices into the image, ``y * hsize + x``.
        max_depth: Recursion budget per primary ray.

    Yields:
        PixelResult for each index, in order.
    """
    hsize = camera.hsize
    for index in pixels:
        y, x = divmod(index, hsize)
        ray = camera.ray_for_pixel(x, y)
        yield PixelResult(x, y, world.color_at(ray, max_depth))


def _render_chunk(camera: Camera, world: World, pixels: range, max_depth: int) -> list[PixelResult]:
    """Process-pool entry point: render a whole chunk at once."""
    return list(render_pixels(camera, world, pixels, max_depth))


def _produce(channel: PixelChannel, camera: Camera, world: World, pixels: range, max_depth: int) -> None:
    """Thread worker: stream a chunk into the channel."""
    try:
        for result in render_pixels(camera, world, pixels, max_depth):
            channel.send(result)
        channel.send(_WorkerDone())
    except ChannelClosed:
        logger.debug("Worker for pixels %d-%d stopped: channel closed", pixels.start, pixels.stop)
    except Exception as exc:
        try:
            channel.send(_WorkerDone(error=exc))
        except ChannelClosed:
            logger.debug("Worker error after channel closed: %s", exc)


# =============================================================================
# Entry points
# =============================================================================


def render(camera: Camera, world: World, max_depth: int = MAX_REFLECTIONS) -> Canvas:
    """Render the whole image on the calling thread.

    Args:
        camera: Camera generating primary rays.
        world: Scene to trace.
        max_depth: Recursion budget per primary ray.

    Returns:
        Canvas of size camera.hsize x camera.vsize.
    """
    logger.info("Rendering %dx%d serially", camera.hsize, camera.vsize)
    start = time.perf_counter()

    canvas = Canvas(camera.hsize, camera.vsize)
    for result in render_pixels(camera, world, range(camera.hsize * camera.vsize), max_depth):
        canvas.write_pixel(result.x, result.y, result.color)

    logger.info("Render finished in %.2fs", time.perf_counter() - start)
    return canvas


def stream_pixels(
    camera: Camera,
    world: World,
    settings: RenderSettings | None = None,
) -> Iterator[PixelResult]:
    """Render with worker threads, yielding pixels as they complete.

    Pixels arrive in no particular order across workers. Closing the
    generator (or abandoning it) closes the channel and stops the workers.

    Raises:
        Exception: The first error raised by any worker.
    """
    if settings is None:
        settings = RenderSettings()

    chunks = partition(camera.hsize * camera.vsize, settings.workers)
    channel = PixelChannel(settings.channel_capacity)

    with ThreadPoolExecutor(max_workers=max(len(chunks), 1), thread_name_prefix="render") as pool:
        try:
            for chunk in chunks:
                pool.submit(_produce, channel, camera, world, chunk, settings.max_depth)

            active = len(chunks)
            while active:
                item = channel.receive()
                if isinstance(item, _WorkerDone):
                    active -= 1
                    if item.error is not None:
                        raise item.error
                    continue
                yield item
        finally:
            channel.close()


def render_parallel(
    camera: Camera,
    world: World,
    settings: RenderSettings | None = None,
    callback: ProgressCallback | None = None,
) -> Canvas:
    """Render with a pool of workers into a canvas.

    Args:
        camera: Camera generating primary rays.
        world: Scene to trace.
        settings: Worker count, recursion depth and backend.
        callback: Optional progress callback receiving
            (completed_pixels, total_pixels). Returning False cancels the
            render; the canvas keeps whatever was finished.

    Returns:
        The rendered canvas.
    """
    if settings is None:
        settings = RenderSettings()

    logger.info(
        "Rendering %dx%d with %d %s worker(s)",
        camera.hsize,
        camera.vsize,
        settings.workers,
        settings.backend,
    )
    start = time.perf_counter()

    canvas = Canvas(camera.hsize, camera.vsize)
    if settings.backend == "process":
        cancelled = _render_processes(camera, world, settings, canvas, callback)
    else:
        cancelled = _render_threads(camera, world, settings, canvas, callback)

    elapsed = time.perf_counter() - start
    if cancelled:
        logger.info("Render cancelled after %.2fs", elapsed)
    else:
        logger.info("Render finished in %.2fs", elapsed)
    return canvas


def _render_threads(
    camera: Camera,
    world: World,
    settings: RenderSettings,
    canvas: Canvas,
    callback: ProgressCallback | None,
) -> bool:
    total = camera.hsize * camera.vsize
    completed = 0
    with closing(stream_pixels(camera, world, settings)) as stream:
        for result in stream:
            canvas.write_pixel(result.x, result.y, result.color)
            completed += 1
            # Report once per image row and at the end
            if callback is not None and (completed % camera.hsize == 0 or completed == total):
                if callback(completed, total) is False:
                    return True
    return False


def _render_processes(
    camera: Camera,
    world: World,
    settings: RenderSettings,
    canvas: Canvas,
    callback: ProgressCallback | None,
) -> bool:
    total = camera.hsize * camera.vsize
    chunks = partition(total, settings.workers)
    completed = 0
    with ProcessPoolExecutor(max_workers=len(chunks)) as pool:
        futures = [
            pool.submit(_render_chunk, camera, world, chunk, settings.max_depth) for chunk in chunks
        ]
        for future in as_completed(futures):
            chunk_results = future.result()
            for result in chunk_results:
                canvas.write_pixel(result.x, result.y, result.color)
            completed += len(chunk_results)
            if callback is not None and callback(completed, total) is False:
                pool.shutdown(wait=True, cancel_futures=True)
                return True
    return False
