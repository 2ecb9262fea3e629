# services/__init__.py
"""Company registry, error kinds and roster import."""
