"""
palettekit: five-color palette generation with locks, tone ladders and HSL/RGB/HEX conversion.
"""
__version__ = "0.1.0"
