"""
Error classes raised while binding environment variables onto a dataclass.

**Conceptual**: Every failure the binder can surface derives from
PathEnvConfigError, so callers can catch one base class at startup, or catch
a specific subclass when they need to tell "the declaration is wrong" apart
from "the deployment forgot a variable".

**Taxonomy**:
  - InvalidSpecificationError: the object handed to the binder is not a
    mutable dataclass instance (FieldNameError narrows this to a field name
    that cannot be turned into a variable name).
  - MissingRequiredVariableError: a required field has no value, no file and
    no default.
  - TypeConversionError: a resolved string does not parse into the field's
    declared type.
  - FileIndirectionError: the file named by a `<NAME>_FILE` variable could not
    be read.
"""


class PathEnvConfigError(Exception):
    """
    Base exception for configuration binding errors.

    **Usage**: Catch this at application startup to report any configuration
    problem and halt, or catch a subclass for fine-grained handling.
    """
    pass


class InvalidSpecificationError(PathEnvConfigError, TypeError):
    """
    Raised when the specification is not a mutable dataclass instance.

    **Conceptual**: The binder writes fields in place, so it needs an
    *instance* (not the class itself) whose fields can be assigned. Frozen
    dataclasses, plain objects, scalars and collections are all rejected
    before the environment is consulted.
    """
    pass


class FieldNameError(InvalidSpecificationError):
    """Raised when a field name produces no variable-name tokens."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            f"Failed to turn field name '{field_name}' into an environment variable"
        )


class MissingRequiredVariableError(PathEnvConfigError):
    """
    Raised when a required field cannot be resolved.

    Attributes:
        variable_name: The direct variable that was looked up.
        file_variable_name: The `_FILE` companion that was looked up.
    """

    def __init__(self, variable_name: str, file_variable_name: str):
        self.variable_name = variable_name
        self.file_variable_name = file_variable_name
        super().__init__(
            f"neither '{variable_name}' nor '{file_variable_name}' were provided "
            f"as environment variables. One of them is required"
        )


class TypeConversionError(PathEnvConfigError, ValueError):
    """
    Raised when a resolved value cannot be converted to the field's type.

    Attributes:
        variable_name: Variable the value came from.
        target_type: The type the binder tried to produce.
        value: The raw string that failed to convert.
    """

    def __init__(self, variable_name: str, target_type, value: str):
        self.variable_name = variable_name
        self.target_type = target_type
        self.value = value
        type_name = getattr(target_type, "__name__", repr(target_type))
        super().__init__(
            f"unable to convert value for environment variable '{variable_name}' "
            f"to target type {type_name}"
        )


class FileIndirectionError(PathEnvConfigError):
    """
    Raised when the file named by a `_FILE` variable cannot be read.

    **Recovery**: Usually a broken deployment (secret not mounted, wrong
    path, wrong permissions). Check the path reported in the message.

    Attributes:
        variable_name: The `_FILE` variable holding the path.
        path: The path that could not be read.
    """

    def __init__(self, variable_name: str, path: str):
        self.variable_name = variable_name
        self.path = path
        super().__init__(
            f"Unable to read file {path} for environment variable {variable_name}"
        )
