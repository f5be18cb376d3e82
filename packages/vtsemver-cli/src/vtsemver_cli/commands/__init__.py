# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import validate, compare, increment, releases

__all__ = ["validate", "compare", "increment", "releases"]
