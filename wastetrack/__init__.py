"""Waste Tracker: capture waste type, weight and location; dashboard queries and reports."""

__version__ = "0.1.0"
