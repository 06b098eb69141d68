"""
Green Garden API
================

Public site and admin back-office API for a garden services business.
"""
__version__ = "1.0.0"
