"""Composition exports."""

from .composition_merger import CompositionMerger, PropertyMap

__all__ = ["CompositionMerger", "PropertyMap"]
