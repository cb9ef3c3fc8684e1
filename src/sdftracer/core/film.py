"""Render target holding per-pixel radiance sums.

The Film is the single place completed scanlines end up. Worker processes
never touch it; the collecting process copies each finished row in with
write_row() and, once every row has arrived, resolve() converts the sums
into a displayable 8-bit image:

    pixel = clamp(round(sqrt(sum / samples) * 255), 0, 255)

i.e. the per-pixel average, a square-root gamma curve and clamping to the
displayable range. Both steps run as Taichi kernels over Taichi fields, so
Taichi must be initialized before a Film is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from sdftracer.core.film import Film
    >>> film = Film(640, 480)
    >>> film.write_row(0, row)  # row: float64 array of shape (640, 3)
    >>> image = film.resolve(samples=2048)  # uint8 array (480, 640, 3)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti


@ti.data_oriented
class Film:
    """Radiance accumulation buffer backed by Taichi fields.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate the radiance and output fields.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Film dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._radiance = ti.Vector.field(3, dtype=ti.f64, shape=(height, width))
        self._pixels = ti.Vector.field(3, dtype=ti.u8, shape=(height, width))
        self._written = np.zeros(height, dtype=bool)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def rows_written(self) -> int:
        """Number of distinct rows received so far."""
        return int(np.count_nonzero(self._written))

    @property
    def is_complete(self) -> bool:
        """True once every row has been written."""
        return bool(self._written.all())

    @ti.kernel
    def _store_row(self, y: ti.i32, row: ti.types.ndarray(dtype=ti.f64, ndim=2)):
        for x in range(row.shape[0]):
            self._radiance[y, x] = ti.Vector([row[x, 0], row[x, 1], row[x, 2]])

    @ti.kernel
    def _resolve(self, inv_samples: ti.f64):
        for y, x in self._radiance:
            mean = ti.max(self._radiance[y, x] * inv_samples, 0.0)
            # Values are non-negative, so floor(v + 0.5) rounds half away from zero
            encoded = ti.floor(ti.sqrt(mean) * 255.0 + 0.5)
            self._pixels[y, x] = ti.cast(ti.math.clamp(encoded, 0.0, 255.0), ti.u8)

    def write_row(self, y: int, row: npt.ArrayLike) -> None:
        """Store the radiance sums of one scanline.

        Rows own disjoint pixels, so the order in which they arrive does
        not affect the result. Writing a row again replaces it.

        Args:
            y: Row index (0 = top).
            row: Radiance sums of shape (width, 3).

        Raises:
            ValueError: If y is out of range or row has the wrong shape.
        """
        if not 0 <= y < self._height:
            raise ValueError(f"Row index {y} outside film of height {self._height}")
        data = np.ascontiguousarray(row, dtype=np.float64)
        if data.shape != (self._width, 3):
            raise ValueError(
                f"Row shape must be ({self._width}, 3), got {data.shape}"
            )
        self._store_row(y, data)
        self._written[y] = True

    def resolve(self, samples: int) -> npt.NDArray[np.uint8]:
        """Average, gamma-encode and clamp the film into an 8-bit image.

        Args:
            samples: Number of samples summed into every pixel.

        Returns:
            Array of shape (height, width, 3) with dtype uint8.

        Raises:
            ValueError: If samples is not positive.
        """
        if samples <= 0:
            raise ValueError(f"samples must be positive, got {samples}")
        self._resolve(1.0 / samples)
        return self._pixels.to_numpy()

    def linear_image(self, samples: int) -> npt.NDArray[np.float64]:
        """Return the averaged linear radiance, shape (height, width, 3)."""
        if samples <= 0:
            raise ValueError(f"samples must be positive, got {samples}")
        return self._radiance.to_numpy() / samples

    def __repr__(self) -> str:
        return (
            f"Film(width={self._width}, height={self._height}, "
            f"rows_written={self.rows_written})"
        )
