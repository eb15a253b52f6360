import numpy as np
import pytest
from PIL import Image

from juliarender.image.png_writer import save_image

def test_png_round_trip(tmp_path):
    raster = np.arange(4 * 5 * 3, dtype=np.uint8).reshape(4, 5, 3)
    path = tmp_path / "nested" / "out.png"
    assert save_image(raster, str(path)) == str(path)
    with Image.open(path) as img:
        assert img.mode == "RGB"
        assert img.size == (5, 4)
        assert np.array_equal(np.asarray(img), raster)

def test_rejects_wrong_shape(tmp_path):
    with pytest.raises(ValueError):
        save_image(np.zeros((4, 5), dtype=np.uint8), str(tmp_path / "out.png"))

def test_rejects_wrong_dtype(tmp_path):
    with pytest.raises(ValueError):
        save_image(np.zeros((4, 5, 3), dtype=np.float64), str(tmp_path / "out.png"))
