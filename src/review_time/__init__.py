"""Measure how long Modrinth takes to approve newly submitted mods."""

__version__ = "0.1.0"
