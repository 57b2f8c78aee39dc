"""
Field descriptors: what the binder needs to know about each dataclass field.

**Conceptual**: The binder never looks at a dataclass directly. It asks this
module for one FieldDescriptor per field, in declaration order, carrying:
  - name: the attribute name (used to build the variable name),
  - shape: scalar, optional scalar, embedded struct or optional struct,
  - target_type: the scalar type or dataclass to produce,
  - required / default: read from the field's metadata.

**Declaring metadata**: Use env_field() or plain dataclasses.field():

    @dataclass
    class ServiceConfig:
        name: str = env_field("", required=True)
        port: int = env_field(0, default="8080")
        debug: bool = False
        database: Optional[DatabaseConfig] = None

`required` and `default` are the only metadata keys the binder reads. The
`default` is an environment-style string, converted like any other resolved
value; it is unrelated to the dataclass default (the value the field holds
before binding).
"""

import dataclasses
import enum
import types
import typing
from dataclasses import dataclass, field, MISSING
from typing import Any, Optional, Union

from pathenvconfig.binding.convert import parse_bool
from pathenvconfig.utils.errors import InvalidSpecificationError


REQUIRED_KEY = "required"
DEFAULT_KEY = "default"


class FieldShape(enum.Enum):
    """How the binder treats a field."""
    SCALAR = "scalar"
    OPTIONAL_SCALAR = "optional_scalar"
    STRUCT = "struct"
    OPTIONAL_STRUCT = "optional_struct"


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Static description of one bindable field.

    Attributes:
        name: Attribute name on the dataclass.
        shape: FieldShape of the field.
        target_type: Scalar type (str, int, ...) or nested dataclass type,
                     with any Optional[...] wrapper removed.
        required: True if a missing value is an error.
        default: Environment-style default string, or None for no default.
    """
    name: str
    shape: FieldShape
    target_type: Any
    required: bool = False
    default: Optional[str] = None


def env_field(
    initial: Any = MISSING,
    *,
    required: bool = False,
    default: Optional[str] = None,
    default_factory: Any = MISSING,
    **kwargs,
):
    """
    Declare a dataclass field with binder metadata.

    Args:
        initial: Value the field holds before binding (dataclass default).
        required: Fail the bind if no value can be resolved.
        default: String used when neither the variable nor its file
                 companion is set.
        default_factory: Dataclass default_factory, for mutable initial values
                         such as nested dataclasses.
        **kwargs: Passed through to dataclasses.field (repr, compare, ...).

    Returns:
        A dataclasses.Field carrying the metadata.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[REQUIRED_KEY] = required
    if default is not None:
        metadata[DEFAULT_KEY] = default

    return field(
        default=initial,
        default_factory=default_factory,
        metadata=metadata,
        **kwargs,
    )


def unwrap_optional(annotation) -> tuple[Any, bool]:
    """
    Strip an Optional[...] / X | None wrapper.

    Returns:
        (inner type, True) for Optional[X]; (annotation, False) otherwise.
        Unions of several non-None types are returned unchanged.
    """
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = typing.get_args(annotation)
        non_none = [arg for arg in args if arg is not type(None)]
        if len(non_none) == 1 and len(args) == 2:
            return non_none[0], True
    return annotation, False


def is_dataclass_type(candidate) -> bool:
    return isinstance(candidate, type) and dataclasses.is_dataclass(candidate)


def _read_required(spec_type, f: dataclasses.Field) -> bool:
    required = f.metadata.get(REQUIRED_KEY, False)
    if isinstance(required, str):
        try:
            return parse_bool(required)
        except ValueError as e:
            raise InvalidSpecificationError(
                f"Field '{f.name}' of {spec_type.__name__} has an invalid "
                f"'{REQUIRED_KEY}' marker: {required!r}"
            ) from e
    return bool(required)


def _read_default(f: dataclasses.Field) -> Optional[str]:
    default = f.metadata.get(DEFAULT_KEY)
    if default is None:
        return None
    return str(default)


def describe_fields(spec) -> list[FieldDescriptor]:
    """
    Describe the public fields of a dataclass instance in declaration order.

    Private fields (leading underscore) are omitted; the binder never writes
    them.

    Args:
        spec: Dataclass instance.

    Returns:
        List of FieldDescriptor, one per public field.

    Raises:
        InvalidSpecificationError: If annotations cannot be resolved or
            metadata is malformed.
    """
    spec_type = type(spec)
    try:
        hints = typing.get_type_hints(spec_type)
    except NameError as e:
        raise InvalidSpecificationError(
            f"Unable to resolve field annotations of {spec_type.__name__}: {e}"
        ) from e

    descriptors = []
    for f in dataclasses.fields(spec_type):
        if f.name.startswith("_"):
            continue

        target_type, optional = unwrap_optional(hints.get(f.name, f.type))
        if is_dataclass_type(target_type):
            shape = FieldShape.OPTIONAL_STRUCT if optional else FieldShape.STRUCT
        else:
            shape = FieldShape.OPTIONAL_SCALAR if optional else FieldShape.SCALAR

        descriptors.append(
            FieldDescriptor(
                name=f.name,
                shape=shape,
                target_type=target_type,
                required=_read_required(spec_type, f),
                default=_read_default(f),
            )
        )

    return descriptors
