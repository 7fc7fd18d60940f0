"""Cookbook of small Python idioms: a guarded lazy singleton plus demos."""

__version__ = "1.0.0"
