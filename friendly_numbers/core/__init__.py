"""
Core numeric primitives, option models, and contracts.

This module contains the building blocks that are independent of any
locale formatter: significant-digit arithmetic, scaling, and scale generation.
"""
