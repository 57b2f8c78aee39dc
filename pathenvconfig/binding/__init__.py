"""
Binding of environment values onto dataclass fields.

Contains field introspection (fields.py), value resolution including file
indirection (resolve.py), scalar conversion (convert.py) and the recursive
binder (binder.py).
"""
