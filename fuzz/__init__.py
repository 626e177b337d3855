"""Atheris fuzz targets for the control-file parser.

Requires Atheris installation (the ``fuzz`` extra).

Targets:
    parser.py - Checks parser totality and document invariants
"""
