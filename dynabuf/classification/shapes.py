from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Tuple, Type

from google.protobuf.message import Message


class Shape(Enum):
    """
    The two shapes every public operation accepts.

    - RECORD: one protobuf message / one attribute map
    - COLLECTION: an ordered, homogeneous sequence of them
    """
    RECORD = "record"
    COLLECTION = "collection"


class RecordCollection(list):
    """
    A list of protobuf messages that knows its element type.

    Usable as a Marshal input (typed even when empty) and as an
    Unmarshal destination, where decoded records are appended.

        people = RecordCollection(Person)
        dynabuf.unmarshal(items, people)
    """

    def __init__(self, record_type: Type[Message], iterable: Iterable[Message] = ()):
        super().__init__(iterable)
        self.record_type = record_type

    def __repr__(self) -> str:
        name = getattr(self.record_type, "__name__", repr(self.record_type))
        return f"RecordCollection({name}, {list.__repr__(self)})"


@dataclass(frozen=True)
class RecordInput:
    """A single record, already classified."""
    record: Message

    @property
    def shape(self) -> Shape:
        return Shape.RECORD


@dataclass(frozen=True)
class RecordCollectionInput:
    """
    A homogeneous record collection, already classified.
    record_type is None only for an empty, untyped sequence.
    """
    record_type: Optional[Type[Message]]
    records: Tuple[Message, ...]

    @property
    def shape(self) -> Shape:
        return Shape.COLLECTION

    def __len__(self) -> int:
        return len(self.records)


def type_name(value: Any) -> str:
    """Runtime type name used in InvalidInput / InvalidOutput details."""
    if isinstance(value, type):
        return f"type[{value.__module__}.{value.__qualname__}]"
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"
