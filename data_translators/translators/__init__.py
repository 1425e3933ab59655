"""Translators: one renderer per target syntax, plus the dispatcher.

Each translator implements ``render(value, options) -> str`` on top of the
shape classifier. The dispatcher resolves target names and aliases through
the JSON target definitions in ``definitions/``.
"""
