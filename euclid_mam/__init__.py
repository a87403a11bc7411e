"""
Multi Author Metabox: tag posts with contributor authors and show them at
the end of the post.
"""

__version__ = "2.0.0"
