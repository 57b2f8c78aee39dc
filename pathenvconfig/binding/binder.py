"""
Bind environment variables onto a dataclass instance, in place.

**Conceptual**: process() walks the fields of a mutable dataclass in
declaration order. Each field name becomes a variable name under the
current prefix (see pathenvconfig.naming.transform); scalars are resolved
and converted, nested dataclasses are bound recursively with the field's
variable name as the new prefix.

    @dataclass
    class DatabaseConfig:
        user: str = ""
        password: str = env_field("", required=True)

    @dataclass
    class AppConfig:
        name: str = env_field("", required=True)
        db: DatabaseConfig = field(default_factory=DatabaseConfig)
        replica: Optional[DatabaseConfig] = None

    config = AppConfig()
    process("APP", config)
    # APP_NAME, APP_DB_USER, APP_DB_PASSWORD(_FILE),
    # APP_REPLICA_USER, APP_REPLICA_PASSWORD(_FILE)

**Optional sub-structures**: A field typed Optional[SomeDataclass] that is
None is bound into a fresh local instance; the instance is only assigned to
the field when at least one of its fields received a value. A sub-structure
the caller already allocated is bound in place and never reset to None.
A dataclass that contains itself (Optional["Node"]) cannot be allocated
this way and is rejected with InvalidSpecificationError.

**Failure semantics**: The first error aborts the bind. Fields assigned
before the failing one keep their new values; there is no rollback.
"""

import dataclasses
import logging
import os
from typing import Mapping, Optional

from pathenvconfig.binding.convert import convert_value
from pathenvconfig.binding.fields import FieldShape, describe_fields
from pathenvconfig.binding.resolve import resolve_value
from pathenvconfig.config.settings import BinderSettings, get_settings
from pathenvconfig.naming.transform import field_name_to_env_var
from pathenvconfig.utils.errors import InvalidSpecificationError


logger = logging.getLogger(__name__)


def normalize_prefix(prefix: str) -> str:
    """Append "_" to a non-empty prefix that does not already end with one."""
    if prefix and not prefix.endswith("_"):
        return prefix + "_"
    return prefix


def check_specification(spec) -> None:
    """
    Ensure spec is a dataclass instance whose fields can be assigned.

    Raises:
        InvalidSpecificationError: For classes, non-dataclasses and frozen
            dataclasses.
    """
    if isinstance(spec, type) or not dataclasses.is_dataclass(spec):
        raise InvalidSpecificationError(
            f"specification must be a dataclass instance, got {type(spec).__name__}"
        )
    if type(spec).__dataclass_params__.frozen:
        raise InvalidSpecificationError(
            f"specification must be mutable, {type(spec).__name__} is a frozen dataclass"
        )


def _instantiate(spec_type, variable_name: str, path: tuple):
    # Allocating a type that is already being bound would nest forever
    if any(type(instance) is spec_type for instance in path):
        raise InvalidSpecificationError(
            f"Unable to create {spec_type.__name__} for {variable_name}: "
            f"{spec_type.__name__} contains itself, nest it explicitly or leave it unset"
        )
    try:
        return spec_type()
    except TypeError as e:
        raise InvalidSpecificationError(
            f"Unable to create {spec_type.__name__} for {variable_name}: "
            f"nested dataclasses need defaults for every field ({e})"
        ) from e


def _check_cycle(instance, variable_name: str, path: tuple) -> None:
    if any(instance is ancestor for ancestor in path):
        raise InvalidSpecificationError(
            f"{variable_name} refers back to a {type(instance).__name__} "
            f"that is already being bound"
        )


def process(
    prefix: str,
    spec,
    environ: Optional[Mapping[str, str]] = None,
    settings: Optional[BinderSettings] = None,
) -> None:
    """
    Bind environment variables onto spec.

    Args:
        prefix: Namespace prefix; "APP" and "APP_" both yield "APP_NAME"
                for a field `name`. "" means no prefix.
        spec: Mutable dataclass instance, updated in place.
        environ: Variables to read (default: os.environ).
        settings: Binder settings (default: get_settings()).

    Raises:
        InvalidSpecificationError: If spec is not a mutable dataclass instance.
        MissingRequiredVariableError: If a required field cannot be resolved.
        TypeConversionError: If a value does not parse into its field's type.
        FileIndirectionError: If a `_FILE` path cannot be read.
    """
    process_impl(prefix, spec, environ=environ, settings=settings)


def process_impl(
    prefix: str,
    spec,
    environ: Optional[Mapping[str, str]] = None,
    settings: Optional[BinderSettings] = None,
) -> bool:
    """
    Bind environment variables onto spec and report whether anything was set.

    Same contract as process(). The return value lets callers tell "nothing
    configured" apart from "values (or defaults) applied".

    Returns:
        True if at least one field, at any depth, was assigned.
    """
    if environ is None:
        environ = os.environ
    if settings is None:
        settings = get_settings()

    return _bind(prefix, spec, environ, settings, ())


def _bind(prefix: str, spec, environ: Mapping[str, str], settings: BinderSettings, ancestors: tuple) -> bool:
    prefix = normalize_prefix(prefix)
    check_specification(spec)

    # Instances currently being bound, outermost first, spec last
    path = ancestors + (spec,)
    changed = False

    for descriptor in describe_fields(spec):
        variable_name = field_name_to_env_var(prefix, descriptor.name)

        if descriptor.shape is FieldShape.OPTIONAL_STRUCT:
            current = getattr(spec, descriptor.name)
            candidate = current
            if candidate is None:
                candidate = _instantiate(descriptor.target_type, variable_name, path)
            _check_cycle(candidate, variable_name, path)

            value_set = _bind(variable_name, candidate, environ, settings, path)
            if current is None and value_set:
                setattr(spec, descriptor.name, candidate)
            elif current is None:
                logger.debug("Leaving %s unset, nothing configured under it", variable_name)
            changed = changed or value_set

        elif descriptor.shape is FieldShape.STRUCT:
            current = getattr(spec, descriptor.name)
            if current is None:
                current = _instantiate(descriptor.target_type, variable_name, path)
                setattr(spec, descriptor.name, current)
            _check_cycle(current, variable_name, path)

            value_set = _bind(variable_name, current, environ, settings, path)
            changed = changed or value_set

        else:
            raw, found = resolve_value(
                variable_name,
                descriptor.required,
                descriptor.default,
                environ,
                settings,
            )
            if found:
                setattr(
                    spec,
                    descriptor.name,
                    convert_value(variable_name, raw, descriptor.target_type),
                )
                changed = True

    return changed
