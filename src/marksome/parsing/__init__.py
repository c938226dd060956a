"""Inline parsing stages for Marksome.

Each stage is a mixin composed into ``marksome.parser.Parser``:

- ``LinkScanningMixin``: reference links and their blocks
- ``DelimiterScanningMixin``: ``*``/``_`` runs and flanking classification
- ``EmphasisMixin``: per-block delimiter stack matching
- ``SegmentTreeMixin``: nesting matches into segments
"""

from marksome.parsing.delimiters import DelimiterScanningMixin
from marksome.parsing.emphasis import EmphasisMixin
from marksome.parsing.escape import is_escaped, unescape
from marksome.parsing.links import LinkScanningMixin
from marksome.parsing.tree import SegmentTreeMixin

__all__ = [
    "DelimiterScanningMixin",
    "EmphasisMixin",
    "LinkScanningMixin",
    "SegmentTreeMixin",
    "is_escaped",
    "unescape",
]
