"""Scanline renderer distributing rows over a worker pool.

Rendering is split into one task per image row. Each task owns a private
random generator and an output buffer for its row, traces `samples`
independent primary rays per pixel through the configured integrator and
returns the summed radiance. The process that calls render() is the single
consumer: it writes finished rows into a Film as they complete, in whatever
order that happens, and reports progress through an optional callback.

Row tasks are pure Python, so they run in worker processes to use more than
one core. Each task receives its own copy of the immutable scene, camera and
configuration; nothing is shared or mutated across workers.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from sdftracer.core.config import RenderConfig
    >>> from sdftracer.core.renderer import ScanlineRenderer
    >>> from sdftracer.scene.presets import create_sphere_scene
    >>>
    >>> config = RenderConfig.path_tracing().with_overrides(width=64, height=48, samples=4)
    >>> objects, camera = create_sphere_scene(config.aspect)
    >>> renderer = ScanlineRenderer(objects, camera, config)
    >>> film = renderer.render()
    >>> image = film.resolve(config.samples)
"""

from __future__ import annotations

import logging
import multiprocessing
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from typing import Any, Optional

import numpy as np
import numpy.typing as npt

from sdftracer.camera.pinhole import Camera, get_ray_jittered
from sdftracer.core.config import RenderConfig
from sdftracer.core.film import Film
from sdftracer.core.integrator import Integrator, get_integrator
from sdftracer.core.ray import RandomSource
from sdftracer.core.vector import Vector3

logger = logging.getLogger(__name__)

# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]


def row_generator(y: int, seed: Optional[int] = None) -> RandomSource:
    """Create the private random generator of one row task.

    Args:
        y: Row index.
        seed: Base seed. None draws fresh OS entropy, so renders differ run
            to run.

    Returns:
        A numpy Generator. With a seed, each row gets an independent stream
        determined only by (seed, y).
    """
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng([seed, y])


def render_row(
    y: int,
    objects: Sequence[Any],
    camera: Camera,
    config: RenderConfig,
    integrator: Integrator,
    seed: Optional[int] = None,
) -> npt.NDArray[np.float64]:
    """Trace every sample of one scanline.

    Module-level so worker processes can receive it by reference.

    Args:
        y: Row index (0 = top).
        objects: Scene objects passed to the integrator.
        camera: Camera generating primary rays.
        config: Render parameters.
        integrator: Light-transport function (ray, objects, rng, depth).
        seed: Optional base seed for the row's generator.

    Returns:
        Summed radiance per pixel, shape (width, 3). Divide by
        config.samples for the average.
    """
    rng = row_generator(y, seed)
    row = np.zeros((config.width, 3), dtype=np.float64)
    for x in range(config.width):
        total = Vector3.zero()
        for _ in range(config.samples):
            ray = get_ray_jittered(
                camera,
                x,
                y,
                config.width,
                config.height,
                rng,
                config.pixel_offset,
            )
            total = total + integrator(ray, objects, rng, config.max_bounces)
        row[x] = total.to_tuple()
    return row


class ScanlineRenderer:
    """Renders a scene by tracing every scanline on a process pool.

    Attributes:
        objects: The read-only scene objects.
        camera: The camera generating primary rays.
        config: Render parameters.
        seed: Base seed for the per-row generators, or None.
    """

    def __init__(
        self,
        objects: Sequence[Any],
        camera: Camera,
        config: RenderConfig,
        integrator: Optional[Integrator] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            objects: Scene objects; Intersectable for "trace" mode, SDF for
                "march" mode. Must be picklable.
            camera: Camera generating primary rays.
            config: Render parameters. config.thread_count sets the number
                of worker processes.
            integrator: Override for the light-transport function. Defaults
                to the integrator selected by config.mode. Must be a
                module-level function (or a partial of one) so workers can
                unpickle it.
            seed: Base seed for the row generators. Renders with the same
                seed are identical for any worker count.
        """
        self.objects = tuple(objects)
        self.camera = camera
        self.config = config
        self.seed = seed
        self._integrator = integrator or get_integrator(
            config.mode, config.min_distance, config.max_distance
        )

    def render_row(self, y: int) -> npt.NDArray[np.float64]:
        """Trace one scanline in the calling process."""
        return render_row(y, self.objects, self.camera, self.config, self._integrator, self.seed)

    def render(self, callback: Optional[ProgressCallback] = None) -> Film:
        """Render the full image.

        Args:
            callback: Optional function called after each completed row
                with (rows_completed, total_rows).

        Returns:
            A complete Film holding the radiance sums of every pixel.

        Raises:
            RuntimeError: If any row task fails. Pending rows are cancelled
                and the render is abandoned.
        """
        config = self.config
        film = Film(config.width, config.height)

        logger.info(
            "Rendering %dx%d (%s), %d spp, %d bounces, %d workers",
            config.width,
            config.height,
            config.mode,
            config.samples,
            config.max_bounces,
            config.thread_count,
        )
        start_time = time.time()

        # Workers never touch Taichi; spawn keeps its runtime out of the children
        executor = ProcessPoolExecutor(
            max_workers=config.thread_count,
            mp_context=multiprocessing.get_context("spawn"),
        )
        try:
            futures: dict[Future[npt.NDArray[np.float64]], int] = {
                executor.submit(
                    render_row,
                    y,
                    self.objects,
                    self.camera,
                    config,
                    self._integrator,
                    self.seed,
                ): y
                for y in range(config.height)
            }
            completed = 0
            for future in as_completed(futures):
                y = futures[future]
                try:
                    row = future.result()
                except Exception as exc:
                    executor.shutdown(wait=False, cancel_futures=True)
                    raise RuntimeError(f"Render aborted: row {y} failed") from exc

                film.write_row(y, row)
                completed += 1
                logger.debug("Row %d finished (%d/%d)", y, completed, config.height)
                if callback is not None:
                    callback(completed, config.height)
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

        logger.info("Render finished in %.2fs", time.time() - start_time)
        return film

    def __repr__(self) -> str:
        return (
            f"ScanlineRenderer(mode={self.config.mode!r}, objects={len(self.objects)}, "
            f"size={self.config.width}x{self.config.height})"
        )
