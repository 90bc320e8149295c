"""
Exposes the version of orthodromic
"""
__version__ = 'v1.0.0'
