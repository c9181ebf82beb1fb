#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/renderers/__init__.py
"""Renderers that turn the node tree into output text."""

from md2nexus.renderers.base import BaseRenderer
from md2nexus.renderers.nexus import NexusRenderer, RenderState, Rendered

__all__ = ["BaseRenderer", "NexusRenderer", "RenderState", "Rendered"]
