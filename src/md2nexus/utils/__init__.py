#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/utils/__init__.py
"""Utility helpers shared by the parsers, the API and the CLI."""
