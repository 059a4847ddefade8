# -*- coding: utf-8 -*-
"""
Bundled correction grids.

Grids placed in this package (``geoid.tif`` by default) are installed as
package data and loaded by ``geoidconv.grid.load_bundled_grid``.
"""
