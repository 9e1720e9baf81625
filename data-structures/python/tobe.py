"""
Token client for AlwaysResizeQueue.

Reads whitespace-separated tokens from stdin. Every token except "-" is
enqueued; "-" dequeues and prints the oldest item if there is one.

Usage:
    python tobe.py < tobe.txt
"""

import sys
from pathlib import Path
from typing import Iterable, TextIO

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from always_resize_queue import AlwaysResizeQueue


def run(tokens: Iterable[str], out: TextIO) -> AlwaysResizeQueue[str]:
    queue: AlwaysResizeQueue[str] = AlwaysResizeQueue()
    for token in tokens:
        if token != "-":
            queue.enqueue(token)
        elif not queue.is_empty():
            out.write(queue.dequeue() + " ")
    out.write(f"({queue.size()} left on queue)\n")
    return queue


def main():
    run(sys.stdin.read().split(), sys.stdout)


if __name__ == "__main__":
    main()
