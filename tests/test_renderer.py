"""Tests for the serial and parallel render drivers.

Tests cover:
- Work partitioning
- The bounded pixel channel
- Serial rendering of the reference world
- Parallel rendering (thread and process backends) matching serial output
- Progress reporting and cancellation
- Worker errors and early shutdown
"""

import math
import threading

import pytest


@pytest.fixture
def reference_scene(default_world):
    """Default world seen from (0, 0, -5) by an 11x11 camera."""
    from src.whitted.camera.camera import Camera
    from src.whitted.core.transformations import view_transform
    from src.whitted.core.tuples import point, vector

    camera = Camera(11, 11, math.pi / 2, view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))
    return camera, default_world


class TestPartition:
    """Test splitting pixel indices into worker chunks."""

    def test_even_split(self):
        from src.whitted.core.renderer import partition

        assert partition(12, 3) == [range(0, 4), range(4, 8), range(8, 12)]

    def test_uneven_split(self):
        """Test that chunk sizes differ by at most one."""
        from src.whitted.core.renderer import partition

        chunks = partition(10, 4)
        assert [len(c) for c in chunks] == [3, 3, 2, 2]
        assert [i for c in chunks for i in c] == list(range(10))

    def test_more_workers_than_pixels(self):
        from src.whitted.core.renderer import partition

        assert partition(2, 8) == [range(0, 1), range(1, 2)]

    def test_invalid_arguments(self):
        from src.whitted.core.renderer import partition

        with pytest.raises(ValueError):
            partition(-1, 2)
        with pytest.raises(ValueError):
            partition(10, 0)


class TestPixelChannel:
    """Test the bounded channel between workers and consumer."""

    def test_send_and_receive(self):
        from src.whitted.core.renderer import PixelChannel

        channel = PixelChannel(2)
        channel.send(1)
        channel.send(2)
        assert channel.receive() == 1
        assert channel.receive() == 2

    def test_send_after_close_raises(self):
        from src.whitted.core.renderer import ChannelClosed, PixelChannel

        channel = PixelChannel(1)
        channel.close()
        assert channel.closed
        with pytest.raises(ChannelClosed):
            channel.send(1)

    def test_close_releases_blocked_sender(self):
        """Test that a sender waiting on a full channel stops when it closes."""
        from src.whitted.core.renderer import ChannelClosed, PixelChannel

        channel = PixelChannel(1)
        channel.send("first")
        outcome = []

        def blocked_sender():
            try:
                channel.send("second")
                outcome.append("sent")
            except ChannelClosed:
                outcome.append("closed")

        thread = threading.Thread(target=blocked_sender)
        thread.start()
        channel.close()
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert outcome == ["closed"]

    def test_invalid_capacity(self):
        from src.whitted.core.renderer import PixelChannel

        with pytest.raises(ValueError):
            PixelChannel(0)


class TestRenderSettings:
    """Test render configuration validation."""

    def test_defaults(self):
        from src.whitted.core.renderer import RenderSettings
        from src.whitted.scene.world import MAX_REFLECTIONS

        settings = RenderSettings()
        assert settings.max_depth == MAX_REFLECTIONS
        assert settings.workers >= 1
        assert settings.backend == "thread"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_depth": -1},
            {"workers": 0},
            {"channel_capacity": 0},
            {"backend": "gpu"},
        ],
    )
    def test_invalid_settings(self, kwargs):
        from src.whitted.core.renderer import RenderSettings

        with pytest.raises(ValueError):
            RenderSettings(**kwargs)


class TestSerialRender:
    """Test the single-threaded renderer."""

    def test_render_reference_world(self, reference_scene):
        from src.whitted.core.renderer import render

        camera, world = reference_scene
        image = render(camera, world)
        assert image.width == 11
        assert image.height == 11
        pixel = image.pixel_at(5, 5)
        assert pixel.red == pytest.approx(0.38066, abs=1e-4)
        assert pixel.green == pytest.approx(0.47583, abs=1e-4)
        assert pixel.blue == pytest.approx(0.2855, abs=1e-4)

    def test_render_pixels_order(self, reference_scene):
        from src.whitted.core.renderer import render_pixels

        camera, world = reference_scene
        results = list(render_pixels(camera, world, range(10, 14)))
        assert [(r.x, r.y) for r in results] == [(10, 0), (0, 1), (1, 1), (2, 1)]


class TestParallelRender:
    """Test that the parallel backends reproduce the serial image."""

    @pytest.mark.parametrize("backend", ["thread", "process"])
    def test_matches_serial(self, reference_scene, backend):
        import numpy as np

        from src.whitted.core.renderer import RenderSettings, render, render_parallel

        camera, world = reference_scene
        serial = render(camera, world)
        parallel = render_parallel(camera, world, RenderSettings(workers=3, backend=backend))
        assert np.array_equal(serial.to_numpy(), parallel.to_numpy())

    def test_stream_yields_every_pixel_once(self, reference_scene):
        from src.whitted.core.renderer import RenderSettings, stream_pixels

        camera, world = reference_scene
        results = list(stream_pixels(camera, world, RenderSettings(workers=4, channel_capacity=2)))
        coords = sorted((r.x, r.y) for r in results)
        assert coords == sorted((x, y) for x in range(11) for y in range(11))

    def test_closing_stream_stops_workers(self, reference_scene):
        from src.whitted.core.renderer import RenderSettings, stream_pixels

        camera, world = reference_scene
        stream = stream_pixels(camera, world, RenderSettings(workers=2, channel_capacity=1))
        next(stream)
        stream.close()
        assert not any(t.name.startswith("render") for t in threading.enumerate())

    @pytest.mark.parametrize("backend", ["thread", "process"])
    def test_progress_reaches_total(self, reference_scene, backend):
        from src.whitted.core.renderer import RenderSettings, render_parallel

        camera, world = reference_scene
        calls = []
        render_parallel(
            camera,
            world,
            RenderSettings(workers=2, backend=backend),
            callback=lambda done, total: calls.append((done, total)),
        )
        assert calls[-1] == (121, 121)
        assert [done for done, _ in calls] == sorted(done for done, _ in calls)

    def test_callback_cancels(self, reference_scene):
        from src.whitted.core.renderer import RenderSettings, render_parallel

        camera, world = reference_scene
        calls = []

        def cancel_after_first(done, total):
            calls.append(done)
            return False

        canvas = render_parallel(
            camera,
            world,
            RenderSettings(workers=2, channel_capacity=1),
            callback=cancel_after_first,
        )
        assert len(calls) == 1
        assert canvas.width == 11

    def test_worker_error_is_raised(self, reference_scene):
        from src.whitted.core.renderer import RenderSettings, render_parallel
        from src.whitted.geometry.group import Group

        camera, world = reference_scene

        class BrokenShape(Group):
            def local_intersect(self, ray):
                raise RuntimeError("broken")

        world.add_object(BrokenShape())
        with pytest.raises(RuntimeError, match="broken"):
            render_parallel(camera, world, RenderSettings(workers=2))
