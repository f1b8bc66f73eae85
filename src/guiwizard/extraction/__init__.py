"""
Code Extractor
Recovers window descriptors from hand-written IMGUI source
"""

from .extractor import CodeExtractor, ExtractionFailure, extract_window, IMPORTED_WINDOW_NAME
from .rect import parse_rect

__all__ = [
    'CodeExtractor',
    'ExtractionFailure',
    'extract_window',
    'parse_rect',
    'IMPORTED_WINDOW_NAME',
]
