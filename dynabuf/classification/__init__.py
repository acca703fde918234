# ==============================================
# TOPIC 1: CLASSIFICATION
# ==============================================
#
# This package decides which shape a value has BEFORE it enters
# the encode or decode pipeline: one record, a homogeneous record
# collection, or neither.
#
# Modules:
# --------
# - shapes.py          → Shape enum, RecordCollection, tagged inputs
# - shape_detector.py  → Classify inputs, outputs and attribute payloads
#
# ==============================================

from .shapes import Shape, RecordCollection, RecordInput, RecordCollectionInput
from .shape_detector import ShapeDetector

__all__ = [
    "Shape",
    "RecordCollection",
    "RecordInput",
    "RecordCollectionInput",
    "ShapeDetector"
]
