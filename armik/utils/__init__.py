"""
Shared constants, tolerances, and helper utilities.

Centralizes numerical tolerances, unit conventions, and demo defaults, plus
small stateless helpers used across the armik package.
"""
