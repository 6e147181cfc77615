"""Commands - entry points run by the host editor.

TIER 2: May import from core and lib.
"""
