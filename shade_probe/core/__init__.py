"""shade_probe.core — Foundation layer.

Contains the colour model, HSL conversion, pixel decoding, pixel sources,
settings, and report builder. This module has NO dependencies on
shade_probe.commands or shade_probe.registry.
"""
