"""Rendering boundary: styled spans for the host's compositor."""

from .projector import CursorProjector, ProjectedArea, ProjectedLine, StyledSpan

__all__ = ["CursorProjector", "ProjectedArea", "ProjectedLine", "StyledSpan"]
