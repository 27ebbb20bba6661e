"""Worked exercise solutions, terminal status lines and rust-project.json generation."""

__version__ = "0.1.0"