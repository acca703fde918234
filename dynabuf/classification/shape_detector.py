from collections.abc import Mapping
from typing import Any, Optional, Union

from google.protobuf.message import Message

from dynabuf.classification.shapes import (
    RecordCollection,
    RecordCollectionInput,
    RecordInput,
    Shape,
    type_name,
)
from dynabuf.errors import DynabufError, ErrorKind


class ShapeDetector:
    SEQUENCE_TYPES = (list, tuple)

    @classmethod
    def is_record(cls, value: Any) -> bool:
        return isinstance(value, Message)

    @classmethod
    def is_record_type(cls, record_type: Any) -> bool:
        # Probe a zero value of the element type instead of looking at contents
        if not isinstance(record_type, type):
            return False
        try:
            zero = record_type()
        except Exception:
            return False
        return cls.is_record(zero)

    @classmethod
    def detect_input(cls, value: Any) -> Union[RecordInput, RecordCollectionInput]:
        if isinstance(value, RecordInput):
            if not cls.is_record(value.record):
                raise DynabufError(ErrorKind.INVALID_INPUT, f"RecordInput of {type_name(value.record)}")
            return value

        if isinstance(value, RecordCollectionInput):
            return cls._check_tagged_collection(value)

        if cls.is_record(value):
            return RecordInput(value)

        if isinstance(value, RecordCollection):
            if not cls.is_record_type(value.record_type):
                raise DynabufError(ErrorKind.INVALID_INPUT, type_name(value.record_type))
            return cls._homogeneous(value, value.record_type)

        if isinstance(value, cls.SEQUENCE_TYPES):
            if len(value) == 0:
                return RecordCollectionInput(None, ())
            record_type = type(value[0])
            if not cls.is_record_type(record_type):
                raise DynabufError(ErrorKind.INVALID_INPUT, f"{type_name(value)} of {type_name(record_type)}")
            return cls._homogeneous(value, record_type)

        raise DynabufError(ErrorKind.INVALID_INPUT, type_name(value))

    @classmethod
    def detect_output(cls, target: Any) -> Shape:
        if cls.is_record(target):
            return Shape.RECORD

        if isinstance(target, RecordCollection) and cls.is_record_type(target.record_type):
            return Shape.COLLECTION

        raise DynabufError(ErrorKind.INVALID_OUTPUT, type_name(target))

    @classmethod
    def detect_attributes(cls, attributes: Any) -> Shape:
        if isinstance(attributes, Mapping):
            return Shape.RECORD

        if isinstance(attributes, cls.SEQUENCE_TYPES):
            for item in attributes:
                if not isinstance(item, Mapping):
                    raise DynabufError(
                        ErrorKind.INVALID_OUTPUT,
                        f"unsupported type: {type_name(attributes)} of {type_name(item)}"
                    )
            return Shape.COLLECTION

        raise DynabufError(ErrorKind.INVALID_OUTPUT, f"unsupported type: {type_name(attributes)}")

    @classmethod
    def _check_tagged_collection(cls, tagged: RecordCollectionInput) -> RecordCollectionInput:
        if tagged.record_type is None:
            if len(tagged.records) != 0:
                raise DynabufError(ErrorKind.INVALID_INPUT, "untyped RecordCollectionInput with records")
            return tagged
        if not cls.is_record_type(tagged.record_type):
            raise DynabufError(ErrorKind.INVALID_INPUT, type_name(tagged.record_type))
        return cls._homogeneous(tagged.records, tagged.record_type)

    @classmethod
    def _homogeneous(cls, values, record_type: Optional[type]) -> RecordCollectionInput:
        # Every element is checked before any of them is converted
        for index, item in enumerate(values):
            if type(item) is not record_type:
                raise DynabufError(
                    ErrorKind.INVALID_INPUT,
                    f"heterogeneous collection: expected {type_name(record_type)}, got {type_name(item)}",
                    index=index
                )
        return RecordCollectionInput(record_type, tuple(values))
