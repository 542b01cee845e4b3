"""Recode survey exports and lay out ring and bar charts for reports."""

__version__ = "0.1.0"
