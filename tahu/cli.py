"""Command-line entry point of the compiler."""

from __future__ import annotations

import time
from collections.abc import Sequence

_UNITS = (("s", 1.0), ("ms", 1e-3), ("µs", 1e-6))


def _format_duration(seconds: float) -> str:
    for unit, scale in _UNITS:
        if seconds >= scale:
            value = seconds / scale
            break
    else:
        unit, value = "ns", seconds / 1e-9
    text = f"{value:.9f}".rstrip("0").rstrip(".")
    return f"{text}{unit}"


def run_compiler() -> None:
    """Run the compilation pipeline."""
    print("running compiler")
    time.sleep(0.1)


def main(argv: Sequence[str] | None = None) -> int:
    """Compile and report how long it took."""
    start = time.perf_counter()
    run_compiler()
    elapsed = time.perf_counter() - start
    print(f"Compilation success {_format_duration(elapsed)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())