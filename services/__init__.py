"""
services/ - Service Layer
=========================
Entry points callers use; delegates persistence to the repositories.
"""
