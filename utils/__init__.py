"""
utils/ - Shared helpers
=======================
"""
