"""
Snapshot Participant Interface

State holders enlisted in a unit of work. The unit of work captures a snapshot
when it starts and restores it when the block exits without commit, which is
what makes a purchase all-or-nothing across mint, binding and sold count.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ISnapshotParticipant(Protocol):
    def snapshot(self) -> Any:
        """Return an opaque copy of the current state"""
        ...

    def restore(self, snapshot: Any) -> None:
        """Replace the current state with a copy returned by snapshot()"""
        ...
