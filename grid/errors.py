"""
errors.py — Grid Error Taxonomy
================================
Malformed input is the only error condition the core raises on its own.
"No path found" is a normal outcome and never an exception.
"""


class ValidationError(ValueError):
    """Malformed dimensions, out-of-range coordinates or a structurally invalid grid."""
