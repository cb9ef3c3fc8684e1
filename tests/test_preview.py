"""Tests for PNG export and the Matplotlib preview."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest
from PIL import Image

from sdftracer.preview.display import show_preview
from sdftracer.preview.export import save_png, save_png_from_array


def gradient_image(height=4, width=6):
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[..., 0] = np.arange(width, dtype=np.uint8) * 40
    image[..., 1] = (np.arange(height, dtype=np.uint8) * 60)[:, None]
    image[..., 2] = 200
    return image


class TestSavePng:
    """Tests for PNG export."""

    def test_round_trip_pixels(self, tmp_path):
        """Test that the saved file holds exactly the given pixels."""
        image = gradient_image()
        path = save_png_from_array(image, tmp_path / "render.png")

        assert path == tmp_path / "render.png"
        with Image.open(path) as loaded:
            assert loaded.format == "PNG"
            assert loaded.mode == "RGB"
            assert loaded.size == (6, 4)
            np.testing.assert_array_equal(np.asarray(loaded), image)

    def test_creates_parent_directories(self, tmp_path):
        """Test that missing output directories are created."""
        path = save_png_from_array(gradient_image(), str(tmp_path / "a" / "b" / "out.png"))
        assert path.exists()

    def test_rejects_wrong_shape(self, tmp_path):
        """Test that non-RGB arrays are rejected."""
        with pytest.raises(ValueError):
            save_png_from_array(np.zeros((4, 6), dtype=np.uint8), tmp_path / "x.png")
        with pytest.raises(ValueError):
            save_png_from_array(np.zeros((4, 6, 4), dtype=np.uint8), tmp_path / "x.png")

    def test_rejects_wrong_dtype(self, tmp_path):
        """Test that float images must be resolved first."""
        with pytest.raises(ValueError, match="uint8"):
            save_png_from_array(np.zeros((4, 6, 3), dtype=np.float64), tmp_path / "x.png")

    def test_save_film(self, tmp_path):
        """Test resolving and saving a film in one step."""
        from sdftracer.core.film import Film

        film = Film(2, 1)
        film.write_row(0, [[2.0, 2.0, 2.0], [0.0, 0.0, 0.0]])
        path = save_png(film, tmp_path / "film.png", samples=2)

        with Image.open(path) as loaded:
            pixels = np.asarray(loaded)
        assert list(pixels[0, 0]) == [255, 255, 255]
        assert list(pixels[0, 1]) == [0, 0, 0]


class TestShowPreview:
    """Tests for the Matplotlib preview."""

    def test_default_title(self, monkeypatch):
        """Test that the figure shows the image with a size title."""
        import matplotlib.pyplot as plt

        shown = []
        monkeypatch.setattr(plt, "show", lambda block=True: shown.append(block))

        show_preview(gradient_image(), block=False)

        assert shown == [False]
        ax = plt.gcf().axes[0]
        assert ax.get_title() == "Render Preview - 6x4"
        assert len(ax.get_images()) == 1
        plt.close("all")

    def test_custom_title(self, monkeypatch):
        """Test that an explicit title is used."""
        import matplotlib.pyplot as plt

        monkeypatch.setattr(plt, "show", lambda block=True: None)
        show_preview(gradient_image(), title="march - 4 SPP")
        assert plt.gcf().axes[0].get_title() == "march - 4 SPP"
        plt.close("all")
