"""Escape-time rendering of the Mandelbrot set.

The complex plane is mapped onto the image so that column ``j`` of a
``width``-pixel image has real part ``(j - width/2) / (width/4)`` and row
``i`` has imaginary part ``(i - height/2) / (height/4)``. Iteration runs in
single precision. A pixel is drawn when its escape count equals the view's
``draw_at`` value.
"""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass

import numpy as np
from PIL import Image

MODES = ("mono", "tiled")
PALETTE_SIZE = 256
TILE = 100

_FIXED_COLORS = (
    (0, 0, 0),
    (65535, 0, 0),
    (0, 65535, 0),
    (0, 0, 65535),
    (65535, 65535, 0),
    (65535, 0, 65535),
    (0, 65535, 65535),
    (65535, 32767, 0),
)

_TWO = np.float32(2.0)
_FOUR = np.float32(4.0)


@dataclass(frozen=True)
class View:
    """Image size, iteration limit and the escape count that gets drawn."""

    width: int = 800
    height: int = 800
    max_iter: int = 100
    draw_at: int = 100

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {self.max_iter}")

    def c_real(self, column: int) -> np.float32:
        """Real part of the point under ``column``."""
        return np.float32((column - self.width / 2.0) / (self.width / 4.0))

    def c_imag(self, row: int) -> np.float32:
        """Imaginary part of the point under ``row``."""
        return np.float32((row - self.height / 2.0) / (self.height / 4.0))


def escape_time(c_real: float, c_imag: float, max_iter: int = 100) -> int:
    """Number of iterations of ``z = z*z + c`` until ``|z|^2 >= 4``, capped at ``max_iter``.

    At least one iteration is always taken.
    """
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")
    cr = np.float32(c_real)
    ci = np.float32(c_imag)
    zr = np.float32(0.0)
    zi = np.float32(0.0)
    k = 0
    while True:
        temp = np.float32(zr * zr - zi * zi + cr)
        zi = np.float32(_TWO * zr * zi + ci)
        zr = temp
        length_sq = np.float32(zr * zr + zi * zi)
        k += 1
        if not (length_sq < _FOUR and k < max_iter):
            return k


def iteration_grid(view: View | None = None) -> np.ndarray:
    """Escape count of every pixel, as an array of shape ``(height, width)``."""
    view = view or View()
    columns = np.arange(view.width, dtype=np.float64)
    rows = np.arange(view.height, dtype=np.float64)
    cr_line = ((columns - view.width / 2.0) / (view.width / 4.0)).astype(np.float32)
    ci_line = ((rows - view.height / 2.0) / (view.height / 4.0)).astype(np.float32)
    cr = np.broadcast_to(cr_line[None, :], (view.height, view.width)).ravel()
    ci = np.broadcast_to(ci_line[:, None], (view.height, view.width)).ravel()

    zr = np.zeros(cr.size, dtype=np.float32)
    zi = np.zeros(cr.size, dtype=np.float32)
    counts = np.zeros(cr.size, dtype=np.int64)
    active = np.arange(cr.size)

    for _ in range(view.max_iter):
        if active.size == 0:
            break
        ar, ai = zr[active], zi[active]
        temp = ar * ar - ai * ai + cr[active]
        ai = _TWO * ar * ai + ci[active]
        ar = temp
        length_sq = ar * ar + ai * ai
        zr[active] = ar
        zi[active] = ai
        counts[active] += 1
        active = active[length_sq < _FOUR]

    return counts.reshape(view.height, view.width)


def wave_palette(size: int = PALETTE_SIZE) -> list[tuple[int, int, int]]:
    """Sine-wave palette of 16-bit RGB triples; the last entry is black."""
    if size < 1:
        raise ValueError(f"palette size must be positive, got {size}")
    palette = []
    for i in range(size):
        if i == size - 1:
            palette.append((0, 0, 0))
            continue
        ratio = float(np.float32(i / size))
        phase = ratio * 3.14159 * 3
        palette.append(
            tuple(
                int(65535 * (0.5 + 0.5 * math.sin(phase + shift)))
                for shift in (0, 2, 4)
            )
        )
    return palette


def fixed_palette() -> list[tuple[int, int, int]]:
    """Eight named 16-bit colours followed by black up to 256 entries."""
    return list(_FIXED_COLORS) + [(0, 0, 0)] * (PALETTE_SIZE - len(_FIXED_COLORS))


def tile_color_index(row: int, column: int, palette_size: int = PALETTE_SIZE) -> int:
    """Palette index for a pixel, chosen by its 100x100 tile."""
    if row < 0 or column < 0:
        raise ValueError(f"pixel position must not be negative, got ({row}, {column})")
    if palette_size < 1:
        raise ValueError(f"palette size must be positive, got {palette_size}")
    return (row // TILE + column // TILE) % palette_size


def _to_8bit(palette: list[tuple[int, int, int]]) -> np.ndarray:
    return (np.array(palette, dtype=np.int64) >> 8).astype(np.uint8)


def render_image(view: View | None = None, mode: str = "mono") -> Image.Image:
    """Render the set on a white background.

    In ``mono`` mode drawn pixels are black; in ``tiled`` mode each drawn
    pixel takes the fixed-palette colour of its tile.
    """
    if mode not in MODES:
        raise ValueError(f"unknown mode {mode!r}; expected one of {', '.join(MODES)}")
    view = view or View()
    drawn = iteration_grid(view) == view.draw_at
    pixels = np.full((view.height, view.width, 3), 255, dtype=np.uint8)
    if mode == "mono":
        pixels[drawn] = 0
    else:
        palette = _to_8bit(fixed_palette())
        rows = np.arange(view.height)[:, None] // TILE
        columns = np.arange(view.width)[None, :] // TILE
        index = (rows + columns) % PALETTE_SIZE
        pixels[drawn] = palette[index[drawn]]
    return Image.fromarray(pixels, mode="RGB")


def main(argv: list[str] | None = None) -> int:
    """Render the set to an image file and report the time taken."""
    defaults = View()
    parser = argparse.ArgumentParser(
        prog="numlab-mandelbrot", description="Render the Mandelbrot set to an image."
    )
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--max-iter", type=int, default=defaults.max_iter)
    parser.add_argument("--draw-at", type=int, default=defaults.draw_at)
    parser.add_argument("--mode", choices=MODES, default="mono")
    parser.add_argument("--output", default="mandelbrot.png")
    args = parser.parse_args(argv)
    try:
        view = View(args.width, args.height, args.max_iter, args.draw_at)
    except ValueError as exc:
        print(f"Erro: {exc}")
        return 1

    start = time.perf_counter()
    image = render_image(view, args.mode)
    seconds = time.perf_counter() - start
    try:
        image.save(args.output)
    except (OSError, ValueError) as exc:
        print(f"Erro: {exc}")
        return 1

    print("Simulação concluída!")
    print(f"Tamanho da imagem: {view.width}x{view.height}")
    print(f"Iterações máximas: {view.max_iter}")
    print(f"Tempo de execução: {seconds:.15f}")
    return 0