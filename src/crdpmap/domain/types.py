# src/crdpmap/domain/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class TypeRef:
    domain: str
    type: str

    def __post_init__(self) -> None:
        if not self.domain or not self.type:
            raise ValueError(f"type reference parts must be non-empty: {self.domain!r}.{self.type!r}")

    @property
    def qualified(self) -> str:
        return f"{self.domain}.{self.type}"


@dataclass(frozen=True, slots=True)
class EventDescriptor:
    domain: str
    event: str
    payload: Optional[TypeRef] = None  # None: listener receives nothing

    @property
    def key(self) -> str:
        return f"{self.domain}.{self.event}"


@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    domain: str
    command: str
    params: Optional[TypeRef] = None
    weak_params: bool = False
    returns: Optional[TypeRef] = None

    @property
    def key(self) -> str:
        return f"{self.domain}.{self.command}"


@dataclass(slots=True)
class ExtractedSchema:
    """
    Event and command maps accumulated by one extraction run.
    Insertion order is domain enumeration order, then declaration order.
    """

    events: Dict[str, EventDescriptor] = field(default_factory=dict)
    commands: Dict[str, CommandDescriptor] = field(default_factory=dict)
    _frozen: bool = field(default=False, init=False, repr=False)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_event(self, event: EventDescriptor) -> bool:
        """Store ``event``; returns True when an earlier entry with the same key was replaced."""
        self._require_open()
        replaced = event.key in self.events
        self.events[event.key] = event
        return replaced

    def add_command(self, command: CommandDescriptor) -> bool:
        self._require_open()
        replaced = command.key in self.commands
        self.commands[command.key] = command
        return replaced

    def freeze(self) -> "ExtractedSchema":
        self._frozen = True
        return self

    def _require_open(self) -> None:
        if self._frozen:
            raise RuntimeError("extracted schema is frozen")

