"""
Configuration of the binder itself.

Provides the frozen BinderSettings object (fatal file-error
policy) loaded from PATHENVCONFIG_* environment variables.
"""
