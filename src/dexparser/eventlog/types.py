"""Event log model: typed entries holding ordered key/value attributes."""

from pydantic import BaseModel, ConfigDict


class Attribute(BaseModel):
    """One key/value pair of an event. Order within an entry is significant."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str = ""


class LogEntry(BaseModel):
    """Events of one type, flattened. May hold several sub-events back to back."""

    type: str  # LogType value, e.g. "wasm", "transfer", "from_contract"
    attributes: list[Attribute] = []


# A Match is the ordered slice of attributes captured by one rule hit.
Match = list[Attribute]
