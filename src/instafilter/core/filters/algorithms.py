"""Vectorised NumPy implementations of the pixel based filters.

Every function takes a ``height x width x 4`` float32 RGBA array and returns a
new array of the same shape.  Inputs are never modified in place.  Alpha is
carried through untouched unless noted otherwise.
"""

from __future__ import annotations

import math

import numpy as np

# Classic sepia colour matrix (rows produce R', G', B').
_SEPIA_MATRIX = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float32,
)

# Fixed seed so crystallize cells land in the same place on every pass.
_CRYSTALLIZE_SEED = 0x1F5A


def _np_mix(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Vectorised equivalent of GLSL's ``mix`` helper."""

    return a * (1.0 - t) + b * t


def sepia_tone(pixels: np.ndarray, intensity: float) -> np.ndarray:
    """Blend *pixels* towards their sepia toned version by *intensity*."""

    result = pixels.copy()
    rgb = pixels[..., :3]
    toned = np.clip(rgb @ _SEPIA_MATRIX.T, 0.0, 1.0)
    result[..., :3] = _np_mix(rgb, toned, float(intensity))
    return result


def edges(pixels: np.ndarray, intensity: float) -> np.ndarray:
    """Return the per-channel Sobel gradient magnitude scaled by *intensity*."""

    rgb = pixels[..., :3]
    p = np.pad(rgb, ((1, 1), (1, 1), (0, 0)), mode="edge")
    gx = (p[:-2, 2:] + 2.0 * p[1:-1, 2:] + p[2:, 2:]) - (p[:-2, :-2] + 2.0 * p[1:-1, :-2] + p[2:, :-2])
    gy = (p[2:, :-2] + 2.0 * p[2:, 1:-1] + p[2:, 2:]) - (p[:-2, :-2] + 2.0 * p[:-2, 1:-1] + p[:-2, 2:])

    result = pixels.copy()
    result[..., :3] = np.hypot(gx, gy) * np.float32(intensity)
    return result


def pixellate(pixels: np.ndarray, scale: float) -> np.ndarray:
    """Replace every ``scale x scale`` block with its average colour.

    Blocks are anchored at the top-left corner; partial blocks on the right
    and bottom edges average the replicated border pixels.  Block sizes below
    two pixels leave the image unchanged.
    """

    block = int(math.floor(float(scale) + 0.5))
    if block <= 1:
        return pixels.copy()

    height, width = pixels.shape[:2]
    rows = -(-height // block)
    cols = -(-width // block)
    padded = np.pad(
        pixels,
        ((0, rows * block - height), (0, cols * block - width), (0, 0)),
        mode="edge",
    )
    means = padded.reshape(rows, block, cols, block, 4).mean(axis=(1, 3), dtype=np.float32)
    expanded = np.repeat(np.repeat(means, block, axis=0), block, axis=1)
    return np.ascontiguousarray(expanded[:height, :width])


def crystallize(pixels: np.ndarray, radius: float) -> np.ndarray:
    """Partition the image into Voronoi cells and flood each with one colour.

    One seed is placed in every ``radius`` sized grid cell with a
    deterministic jitter; each pixel takes the colour found under its nearest
    seed.  Only the 3x3 neighbourhood of grid cells is searched.
    """

    cell = float(radius)
    if cell < 1.0:
        return pixels.copy()

    height, width = pixels.shape[:2]
    rows = int(math.ceil(height / cell))
    cols = int(math.ceil(width / cell))

    # Pad the seed grid by one cell on every side so neighbourhood lookups
    # never index out of bounds.
    rng = np.random.default_rng(_CRYSTALLIZE_SEED)
    jitter = rng.random((rows + 2, cols + 2, 2))
    seed_y = (np.arange(-1, rows + 1)[:, None] + jitter[..., 0]) * cell
    seed_x = (np.arange(-1, cols + 1)[None, :] + jitter[..., 1]) * cell

    ys, xs = np.mgrid[0:height, 0:width]
    centre_y = ys + 0.5
    centre_x = xs + 0.5
    cell_y = np.minimum((centre_y // cell).astype(np.intp), rows - 1)
    cell_x = np.minimum((centre_x // cell).astype(np.intp), cols - 1)

    best = np.full((height, width), np.inf)
    best_y = np.zeros((height, width))
    best_x = np.zeros((height, width))
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            sy = seed_y[cell_y + dy + 1, cell_x + dx + 1]
            sx = seed_x[cell_y + dy + 1, cell_x + dx + 1]
            distance = (sy - centre_y) ** 2 + (sx - centre_x) ** 2
            closer = distance < best
            best = np.where(closer, distance, best)
            best_y = np.where(closer, sy, best_y)
            best_x = np.where(closer, sx, best_x)

    sample_y = np.clip(best_y.astype(np.intp), 0, height - 1)
    sample_x = np.clip(best_x.astype(np.intp), 0, width - 1)
    return np.ascontiguousarray(pixels[sample_y, sample_x])


def vignette(pixels: np.ndarray, intensity: float, radius: float) -> np.ndarray:
    """Darken the image progressively beyond *radius* pixels from the centre."""

    height, width = pixels.shape[:2]
    centre_y = (height - 1) / 2.0
    centre_x = (width - 1) / 2.0
    max_distance = math.hypot(centre_y, centre_x)

    result = pixels.copy()
    inner = max(0.0, float(radius))
    if max_distance <= inner:
        return result

    ys, xs = np.mgrid[0:height, 0:width]
    distance = np.hypot(ys - centre_y, xs - centre_x)
    t = np.clip((distance - inner) / (max_distance - inner), 0.0, 1.0)
    # Smoothstep keeps the transition from the untouched centre soft.
    falloff = t * t * (3.0 - 2.0 * t)
    factor = (1.0 - float(intensity) * falloff).astype(np.float32)
    result[..., :3] = pixels[..., :3] * factor[..., None]
    return result


__all__ = ["crystallize", "edges", "pixellate", "sepia_tone", "vignette"]
