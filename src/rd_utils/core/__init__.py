"""
Core infrastructure for rd-utils.

Logging setup shared by the library modules and the command line.
"""
