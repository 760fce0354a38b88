"""A Python package of 3D geometry primitives for instrument and detector positioning."""

import jax

# all jax-backed helpers work in double precision
jax.config.update("jax_enable_x64", True)

from . import geom  # noqa: E402
from .version import VERSION, VERSION_SHORT  # noqa: E402

__all__: list[str] = ["VERSION", "VERSION_SHORT", "geom"]
