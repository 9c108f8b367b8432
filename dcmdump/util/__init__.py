# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Utility functions for dcmdump."""
