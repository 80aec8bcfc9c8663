"""
errtrace Basic Usage Example

This example demonstrates:
1. Starting a chain and adding context while an error travels up the stack
2. Wrapping errors raised by other libraries
3. Recovering the cause and printing the trace
4. Turning on source locations
"""

import logging

import errtrace


logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("example")


def read_settings(path: str) -> dict:
    try:
        with open(path) as f:
            return {"raw": f.read()}
    except OSError as e:
        raise errtrace.wrapf(e, "reading settings from %s", path) from e


def start_service(path: str) -> None:
    try:
        read_settings(path)
    except errtrace.WrappedError as e:
        raise errtrace.wrap(e, "starting service") from e


def main():
    print("=" * 60)
    print("errtrace Basic Example")
    print("=" * 60)

    # ===== Example 1: Build a chain by hand =====
    print("\n📌 Example 1: root error with context")
    print("-" * 60)

    err = errtrace.new_root("connection refused")
    err = errtrace.wrap(err, "fetching user 42")
    print(f"str(err):   {err}")
    print(f"cause:      {errtrace.cause(err)!r}")
    print(f"trace:      {errtrace.get_trace(err)}")

    # ===== Example 2: Wrap a foreign exception on its way up =====
    print("\n📌 Example 2: wrapping an OSError")
    print("-" * 60)

    try:
        start_service("/does/not/exist.toml")
    except errtrace.WrappedError as e:
        logger.error("service failed: %s\n%s", e, errtrace.details(e))
        print(f"cause is OSError: {errtrace.as_(e, OSError) is not None}")

    # ===== Example 3: Source locations =====
    print("\n📌 Example 3: include caller locations")
    print("-" * 60)

    errtrace.set_include_caller(True)
    err = errtrace.wrap(errtrace.new_root("disk full"), "saving report")
    print(errtrace.details(err))


if __name__ == "__main__":
    main()
