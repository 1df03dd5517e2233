"""Quickstart — parse a path and render it in every projection.

Demonstrates:
- Creating a path object with create_path()
- Setting text and reading the namespace count
- Rendering each TextFlag projection
"""

from __future__ import annotations

from wbem_path import CreateFlag, TextFlag, create_path

if __name__ == "__main__":
    with create_path() as path:
        path.set_text(CreateFlag.ACCEPT_ALL, r"\\server\root\cimv2:Win32_Process")
        print(f"Namespaces: {path.get_namespace_count()}")

        for flags in TextFlag:
            print(f"{flags.name:<26} {path.text(flags)!r}")  # type: ignore[attr-defined]

        # A relative path renders the local machine marker
        path.set_text(CreateFlag.ACCEPT_ALL, r"root\cimv2")
        print(f"Relative: {path.text(TextFlag.SERVER_AND_NAMESPACE_ONLY)}")  # type: ignore[attr-defined]

    print("Done! Path released.")
