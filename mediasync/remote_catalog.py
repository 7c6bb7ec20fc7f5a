"""
RemoteCatalog - Point-in-time snapshot of the remote media library.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional


@dataclass(frozen=True)
class RemoteEntry:
    """
    A file already present in the remote store.

    Attributes:
        id: Remote identifier
        name: Stored filename
        metadata: Remaining fields reported by the store
    """
    id: Any
    name: str
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_dict(cls, data: dict) -> 'RemoteEntry':
        metadata = {k: v for k, v in data.items() if k not in ('id', 'name')}
        return cls(id=data.get('id'), name=data.get('name') or '', metadata=metadata)


class RemoteCatalog:
    """
    Immutable snapshot of remote names plus the names claimed during this run.

    The snapshot is read once; claim() makes the check-and-insert atomic so
    two files of the same batch resolving to one name are never both uploaded.
    """

    def __init__(self, entries: Iterable[RemoteEntry]):
        self.entries: List[RemoteEntry] = list(entries)
        self.names: FrozenSet[str] = frozenset(e.name for e in self.entries)
        self._by_name: Dict[str, RemoteEntry] = {}
        for entry in self.entries:
            self._by_name.setdefault(entry.name, entry)
        self._claimed: set = set()
        self._lock = threading.Lock()

    @classmethod
    def fetch(cls, client) -> 'RemoteCatalog':
        """Build a catalog from a client's fetch_all()."""
        return cls(client.fetch_all())

    def __len__(self) -> int:
        return len(self.entries)

    def contains(self, name: str) -> bool:
        """Exact match against the remote snapshot."""
        return name in self.names

    def claim(self, name: str) -> bool:
        """
        Reserve a name for upload in this run.

        Returns:
            False if the name exists remotely or was already claimed
        """
        with self._lock:
            if name in self.names or name in self._claimed:
                return False
            self._claimed.add(name)
            return True

    def find(self, name: str) -> Optional[RemoteEntry]:
        """First remote entry stored under name."""
        return self._by_name.get(name)
