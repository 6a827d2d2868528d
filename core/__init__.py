"""
Core package - shared utilities that do not depend on the web or data layers.
"""
