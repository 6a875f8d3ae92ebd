"""Advent of Code puzzle solutions for 2023 day 1 and 2024 days 1 to 15."""

__version__ = "0.1.0"