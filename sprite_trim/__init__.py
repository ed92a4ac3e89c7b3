"""
Trim transparent borders from sprites and clamp their aspect ratio.
"""

__version__ = "1.0.0"
__author__ = "Sprite Trim Team"
