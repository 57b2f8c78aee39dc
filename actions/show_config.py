#!/usr/bin/env python3
"""
Bind environment variables onto a dataclass and print the result as JSON.

**Purpose**: Check what a service would see at startup without starting it.
The dataclass is named as `module:ClassName` and must be importable from the
current working directory (or the installed environment).

**Usage**:
    From project root:
    ```bash
    APP_NAME=demo python actions/show_config.py myservice.config:AppConfig --prefix APP
    python actions/show_config.py myservice.config:AppConfig --prefix APP --verbose
    ```

**Exit codes**:
  - 0: Bound successfully, JSON printed to stdout.
  - 2: The target could not be imported, or binding failed (missing required
       variable, bad value, unreadable file, invalid specification).

Values are printed as bound, secrets included; do not pipe the output into
shared logs.
"""

import argparse
import dataclasses
import importlib
import json
import logging
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from pathenvconfig import PathEnvConfigError, process_impl


def load_target(target: str):
    """
    Import `module:ClassName` and return the class.

    Raises:
        ValueError: If target is not in `module:ClassName` form.
        ImportError / AttributeError: If the module or class does not exist.
    """
    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Expected 'module:ClassName', got: {target}")

    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def main(argv=None) -> int:
    """
    Main entry point for the show-config script.

    **Workflow**:
      1. Parse command-line arguments
      2. Import the target dataclass and instantiate it with its defaults
      3. Bind the environment onto it
      4. Print the bound instance as JSON
    """
    parser = argparse.ArgumentParser(
        description="Bind environment variables onto a dataclass and print it as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "target",
        type=str,
        help="Dataclass to bind, as module:ClassName.",
    )

    parser.add_argument(
        "--prefix",
        type=str,
        default="",
        help="Variable name prefix, e.g. APP for APP_NAME. Default: no prefix.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log where every variable was resolved from (to stderr).",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        spec_type = load_target(args.target)
        spec = spec_type()
    except (ValueError, ImportError, AttributeError, TypeError) as e:
        print(f"ERROR: Unable to load {args.target}: {e}", file=sys.stderr)
        return 2

    try:
        changed = process_impl(args.prefix, spec)
    except PathEnvConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if not changed:
        print("WARNING: no field was set from the environment.", file=sys.stderr)

    print(json.dumps(dataclasses.asdict(spec), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
