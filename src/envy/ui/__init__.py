# envy/ui/__init__.py
"""Color handling for Envy output."""
