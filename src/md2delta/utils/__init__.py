#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2delta/utils/__init__.py
"""Shared helpers for dependency checks and debug timing."""

from md2delta.utils.decorators import debug_timer, requires_dependencies

__all__ = ["debug_timer", "requires_dependencies"]
