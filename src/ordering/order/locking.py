"""Per-order mutual exclusion for read-modify-write commands.

Removal, status updates and deletion read an order, change it, and write it
back. Callers processing commands from several threads of one process are
serialized per order here; across processes the ``revision`` token on the
aggregate is the guard.

The lock is taken around ``current_domain.process`` rather than inside the
handler, so the handler's unit of work has committed before the next command
for the same order reads it. Entries are reference counted and leave the
registry as soon as no caller holds or waits on them.

The API routes are ``async`` and command processing never awaits, so
requests served by one event loop already run one at a time and never
contend for these locks. Concurrent API writers in separate workers rely on
``expected_revision``.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from protean.utils.globals import current_domain


class _OrderLock:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


_locks: dict[str, _OrderLock] = {}
_registry_lock = threading.Lock()


def registered_orders() -> set[str]:
    """Ids of orders whose lock is currently held or awaited."""
    with _registry_lock:
        return set(_locks)


@contextmanager
def order_lock(order_id) -> Iterator[None]:
    key = str(order_id)
    with _registry_lock:
        entry = _locks.get(key)
        if entry is None:
            entry = _locks[key] = _OrderLock()
        entry.users += 1

    try:
        with entry.lock:
            yield
    finally:
        with _registry_lock:
            entry.users -= 1
            if entry.users == 0:
                del _locks[key]


def process_exclusively(command):
    """Process a command addressed to one order while holding that order's lock."""
    with order_lock(command.order_id):
        return current_domain.process(command, asynchronous=False)
