"""
models/ - Domain Models
=======================
Plain dataclasses for projects, materials, steps and categories.
"""
