# -*- coding: utf-8 -*-
"""
Shared fixtures - Small global PGM geoid grids and a constant grid.

The PGM grids are 4 columns x 3 rows (90 degree spacing), the smallest
shape that covers the globe.

Author
------
geoidconv contributors

License
-------
MIT License
Copyright (c) 2026 geoidconv contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import numpy as np
import pytest
from affine import Affine

from geoidconv.grid.model import Grid


def make_ascii_pgm(raw, offset=None, scale=None) -> bytes:
    """Encode a (3, 4) array of raw samples as an ASCII PGM."""
    raw = np.asarray(raw, dtype=int)
    lines = ["P2", "# Geoid file in PGM format"]
    if offset is not None:
        lines.append(f"# Offset {offset}")
    if scale is not None:
        lines.append(f"# Scale {scale}")
    lines.append(f"{raw.shape[1]} {raw.shape[0]}")
    lines.append("65535")
    for row in raw:
        lines.append(" ".join(str(v) for v in row))
    return ("\n".join(lines) + "\n").encode("ascii")


@pytest.fixture
def ramp_pgm_bytes():
    """ASCII PGM with raw values 0..11 and value = -10 + 0.5 * raw."""
    return make_ascii_pgm(np.arange(12).reshape(3, 4), offset=-10, scale=0.5)


@pytest.fixture
def constant_pgm_file(tmp_path):
    """Global PGM grid whose correction is 41.3 m everywhere."""
    path = tmp_path / "constant.pgm"
    path.write_bytes(make_ascii_pgm(np.zeros((3, 4)), offset=41.3, scale=1))
    return path


@pytest.fixture
def constant_grid():
    """4x4 one-degree grid over 8..12E, 58..62N with 41.3 m everywhere."""
    return Grid(np.full((4, 4), 41.3), Affine(1.0, 0.0, 8.0, 0.0, -1.0, 62.0))


@pytest.fixture
def pgm_encoder():
    """The ``make_ascii_pgm`` helper, for tests that build their own grids."""
    return make_ascii_pgm
