"""
Core domain models and mathematical primitives.

This module contains the foundational building blocks that are independent
of any rendering layer (GUI, palettes, image buffers, tile scheduling).
"""
