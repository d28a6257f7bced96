"""
Text modules для ach_utils
"""

from ach_utils.text.padding import Justification, pad

__all__ = [
    "Justification",
    "pad",
]
