"""
Generic utility modules shared across the package.

Currently holds the error classes raised by the binder.
"""
