"""Buffer protocol — the two-call get_text pattern with a ctypes buffer.

Demonstrates:
- Querying the required capacity with capacity 0
- Allocating a wide character buffer and retrieving the text
- The single-terminator result of a projection with no data
"""

from __future__ import annotations

import ctypes

from wbem_path import CreateFlag, TextFlag, WbemPath

if __name__ == "__main__":
    with WbemPath() as path:
        path.set_text(CreateFlag.ACCEPT_ALL, r"//server/root/cimv2:Win32_Service")

        required = path.get_text(TextFlag.SERVER_TOO, 0)
        print(f"Required capacity: {required}")

        buf = ctypes.create_unicode_buffer(required)
        path.get_text(TextFlag.SERVER_TOO, required, buf)
        print(f"Text: {buf.value}")

        # No class component: RELATIVE_ONLY has no data, only the terminator is needed
        path.set_text(CreateFlag.ACCEPT_ALL, r"\\server\root")
        print(f"Relative-only capacity: {path.get_text(TextFlag.RELATIVE_ONLY, 0)}")
        print(f"Relative-only text: {path.text(TextFlag.RELATIVE_ONLY)!r}")

    print("Done!")
