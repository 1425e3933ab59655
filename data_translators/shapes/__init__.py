"""Classifies nested values by shape: how each level should be laid out.

Every translator and the dataset normalizer consult ``classify`` one
nesting level at a time.
"""

from data_translators.shapes.classifier import classify, column_union, is_homogeneous
from data_translators.shapes.schemas import Shape, ShapeKind

__all__ = ["Shape", "ShapeKind", "classify", "column_union", "is_homogeneous"]
