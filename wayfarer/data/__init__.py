"""
Data models and persistence for Wayfarer.
"""
