"""Error handling — InvalidParameter, NotImplementedOperation, NoSuchInterface.

Demonstrates the normalized error hierarchy and how to handle errors
programmatically using structured attributes.
"""

from __future__ import annotations

import uuid

from wbem_path import (
    CreateFlag,
    InvalidParameter,
    NoSuchInterface,
    NotImplementedOperation,
    PathError,
    WbemPath,
    create_path,
)

if __name__ == "__main__":
    with WbemPath() as path:
        # --- InvalidParameter (zero mode) ---
        try:
            path.set_text(0, r"\\server\root")
        except InvalidParameter as exc:
            print(f"InvalidParameter: {exc}")
            print(f"  path={exc.path}")

        # --- NotImplementedOperation ---
        path.set_text(CreateFlag.ACCEPT_ALL, r"\\server\root\cimv2:Win32_Process")
        try:
            path.set_server("other")
        except NotImplementedOperation as exc:
            print(f"\nNotImplementedOperation: {exc}")
            print(f"  operation={exc.operation}")
        print(f"State untouched: {path.text()}")

        # --- NoSuchInterface ---
        try:
            path.query_interface(uuid.uuid4())
        except NoSuchInterface as exc:
            print(f"\nNoSuchInterface: {exc}")

        # --- Catch any wbem_path error with the base class ---
        for call in (path.get_key_list, path.remove_all_scopes):
            try:
                call()
            except PathError as exc:
                print(f"\nPathError ({type(exc).__name__}): {exc}")

    # --- ValueError for unknown path types ---
    try:
        create_path("unknown")
    except ValueError as exc:
        print(f"\nValueError: {exc}")

    print("\nDone!")
