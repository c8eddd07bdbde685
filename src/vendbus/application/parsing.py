"""Parse textual event descriptions.

Accepted forms::

    sale:<machine>:<qty>
    refill:<machine>:<qty>
    low-stock-warning:<machine>
    stock-level-ok:<machine>
"""

from __future__ import annotations

from vendbus.core.exceptions import EventParseError
from vendbus.domain.enums import EventType
from vendbus.domain.events import MachineEvent

# Textual prefix → EventType
EVENT_PREFIXES: dict[str, EventType] = {
    t.value.lower().replace("_", "-"): t for t in EventType
}


def parse_event(text: str) -> MachineEvent:
    """Build a ``MachineEvent`` from *text*.

    Raises:
        EventParseError: if the prefix is unknown, the machine id is
            missing, or the quantity is missing, non-numeric or negative.
    """
    parts = [part.strip() for part in text.split(":")]
    prefix = parts[0].lower()
    event_type = EVENT_PREFIXES.get(prefix)
    if event_type is None:
        raise EventParseError(f"Unknown event type '{parts[0]}'", {"input": text})

    expected = 2 if event_type.is_derived else 3
    if len(parts) != expected or not parts[1]:
        usage = f"{prefix}:<machine>" if event_type.is_derived else f"{prefix}:<machine>:<qty>"
        raise EventParseError(f"Expected '{usage}', got '{text}'", {"input": text})

    machine_id = parts[1]
    if event_type.is_derived:
        return MachineEvent(event_type, machine_id)

    try:
        quantity = int(parts[2])
    except ValueError as e:
        raise EventParseError(f"Invalid quantity '{parts[2]}'", {"input": text}) from e
    if quantity < 0:
        raise EventParseError(f"Quantity must not be negative, got {quantity}", {"input": text})
    return MachineEvent(event_type, machine_id, quantity)
