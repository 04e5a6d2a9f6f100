"""
Transaction semantics for the simulated contracts.

Every state changing call runs under one global lock and either completes or leaves
all of its participants exactly as they were before the call.
"""

import threading
from contextlib import contextmanager
from copy import deepcopy
from typing import Any, Iterator

# calls are serialized, as they would be by the chain
CHAIN_LOCK = threading.RLock()


class Stateful:
    """Objects whose `_state_fields` are snapshotted and restored around a transaction"""

    _state_fields: tuple[str, ...] = ()

    def snapshot(self) -> dict[str, Any]:
        return {f: deepcopy(getattr(self, f)) for f in self._state_fields}

    def restore(self, state: dict[str, Any]) -> None:
        for field, value in state.items():
            setattr(self, field, value)


@contextmanager
def transaction(*participants: Any) -> Iterator[None]:
    """Runs the body atomically, participants that are not `Stateful` are left alone"""
    with CHAIN_LOCK:
        saved = [(p, p.snapshot()) for p in participants if isinstance(p, Stateful)]
        try:
            yield
        except Exception:
            # revert
            for participant, state in saved:
                participant.restore(state)
            raise
