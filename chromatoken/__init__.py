"""
chromatoken - design token resolution and color-accessibility engine.

Resolves symbolic theme tokens into concrete values, measures WCAG 2.1
contrast, repairs failing color pairs and simulates color-vision
deficiencies. Every function is pure and takes its theme explicitly.
"""

__version__ = "0.4.0"
