"""
Sand Sort - container sorting puzzle engine.
"""

__version__ = "0.1.0"
