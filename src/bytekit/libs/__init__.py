"""
Low-level byte transformation primitives.
"""
