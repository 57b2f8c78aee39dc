"""
pathenvconfig: bind environment variables onto dataclasses.

Field names map to SCREAMING_SNAKE_CASE variable names under a prefix,
nested dataclasses extend the prefix, and any value can alternatively be
supplied through a file named by a `<NAME>_FILE` variable.

    from dataclasses import dataclass
    from pathenvconfig import env_field, process

    @dataclass
    class Config:
        name: str = env_field("", required=True)
        age: int = env_field(0, default="13")

    config = Config()
    process("APP", config)  # reads APP_NAME / APP_NAME_FILE, APP_AGE / ...
"""

from pathenvconfig.binding.binder import process, process_impl
from pathenvconfig.binding.fields import env_field
from pathenvconfig.config.settings import (
    ENVIRONMENT_VARIABLE_FILE_SUFFIX,
    BinderSettings,
)
from pathenvconfig.naming.transform import field_name_to_env_var
from pathenvconfig.utils.errors import (
    FieldNameError,
    FileIndirectionError,
    InvalidSpecificationError,
    MissingRequiredVariableError,
    PathEnvConfigError,
    TypeConversionError,
)

__all__ = [
    "process",
    "process_impl",
    "env_field",
    "field_name_to_env_var",
    "BinderSettings",
    "ENVIRONMENT_VARIABLE_FILE_SUFFIX",
    "PathEnvConfigError",
    "InvalidSpecificationError",
    "FieldNameError",
    "MissingRequiredVariableError",
    "TypeConversionError",
    "FileIndirectionError",
]
