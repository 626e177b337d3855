#!/usr/bin/env python3
"""Control Parser Integrity Fuzzer (Atheris).

Targets: controlfile.syntax.parser.ControlParser
Feeds arbitrary text to the parser and checks that it either returns a
document satisfying the structural invariants or raises ControlSyntaxError.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("controlfile").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["controlfile"]):
    from controlfile.diagnostics import ControlSyntaxError
    from controlfile.syntax.parser import ControlParser

_PARSER = ControlParser()
_NAME_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-")


def test_one_input(data: bytes) -> None:
    """Atheris entry point: parse arbitrary text and check invariants."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    source = fdp.ConsumeUnicodeNoSurrogates(2048)

    try:
        document = _PARSER.parse(source)
    except ControlSyntaxError as e:
        if not 0 <= e.position <= len(source):
            _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
            msg = f"Error position {e.position} outside source of length {len(source)}"
            raise RuntimeError(msg) from e
        return

    for paragraph in document:
        if not paragraph:
            _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
            msg = "Empty paragraph in parsed document"
            raise RuntimeError(msg)
        for name, value in paragraph.items():
            if not name or not set(name) <= _NAME_CHARS or "\r" in value:
                _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
                msg = f"Invalid field {name!r}: {value!r}"
                raise RuntimeError(msg)


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
