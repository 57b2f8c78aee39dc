"""
Field-name to environment-variable-name conversion.
"""
