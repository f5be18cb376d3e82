# SPDX-License-Identifier: MIT
"""Command line interface for VTubersTV semantic versions."""

__version__ = "0.1.0"
