"""Three concurrent loops writing messages at their own pace."""

from __future__ import annotations

import argparse
import threading
import time
from typing import Callable, Optional

BANNER = "main, foo and bar now executing concurrently ..."
MAIN_MESSAGE = "main is running..."
DONE_MESSAGE = "main is completed"
FOO_MESSAGE = "I'm in foo"
BAR_MESSAGE = "I'm in Bar"


def run_demo(
    iterations: int = 3,
    main_interval: float = 2.0,
    foo_interval: float = 1.0,
    bar_interval: float = 0.5,
    write: Callable[[str], object] = print,
) -> None:
    """Run two background loops while the caller's loop runs ``iterations`` times.

    The background loops stop once the main loop has finished.
    """
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    if min(main_interval, foo_interval, bar_interval) < 0:
        raise ValueError("intervals must not be negative")

    lock = threading.Lock()
    stop = threading.Event()

    def emit(message: str) -> None:
        with lock:
            write(message)

    def worker(message: str, interval: float) -> None:
        while True:
            emit(message)
            if stop.wait(interval):
                return

    threads = [
        threading.Thread(target=worker, args=(FOO_MESSAGE, foo_interval), daemon=True),
        threading.Thread(target=worker, args=(BAR_MESSAGE, bar_interval), daemon=True),
    ]
    for thread in threads:
        thread.start()

    emit(BANNER)
    try:
        for _ in range(iterations):
            emit(MAIN_MESSAGE)
            time.sleep(main_interval)
    finally:
        stop.set()
        for thread in threads:
            thread.join()
    emit(DONE_MESSAGE)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the demonstration from the command line."""
    parser = argparse.ArgumentParser(description="Run three concurrent loops.")
    parser.add_argument("--iterations", type=int, default=3)
    parser.add_argument("--main-interval", type=float, default=2.0)
    parser.add_argument("--foo-interval", type=float, default=1.0)
    parser.add_argument("--bar-interval", type=float, default=0.5)
    args = parser.parse_args(argv)
    try:
        run_demo(
            args.iterations,
            args.main_interval,
            args.foo_interval,
            args.bar_interval,
        )
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())