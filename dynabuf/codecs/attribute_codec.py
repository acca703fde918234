# ==============================================
# AttributeCodec
# ==============================================
#
# PURPOSE:
#   Convert a canonical document to a DynamoDB attribute map (the
#   low-level, tagged wire shape: {"name": {"S": "..."}}) and back,
#   on top of boto3's TypeSerializer / TypeDeserializer.
#
# WHY THIS CLASS EXISTS:
#   boto3 and the proto3 JSON mapping disagree on a few scalars:
#     - boto3 refuses float, JSON documents are full of them
#     - boto3 returns Decimal for every number
#     - boto3 returns Binary for B and set() for SS / NS / BS
#   This class bridges those gaps in both directions so that a
#   document read back from the store is one ParseDict accepts.
#
# CLASS: AttributeCodec
# ---------------------
#   Stateless.
#
#   Methods:
#   --------
#   - document_to_attribute_map(document: dict) -> dict[str, dict]
#   - attribute_map_to_document(attribute_map: Mapping) -> dict
#
# RULES:
# ------
#   Document → attributes:
#     float          → Decimal(repr(value))  → N
#     int            → N
#     str            → S
#     bool           → BOOL
#     None           → NULL
#     list / dict    → L / M (recursively)
#
#   Attributes → document:
#     N (Decimal)    → int if integral, float otherwise (-0 stays -0.0)
#     B (Binary)     → base64 str (proto3 JSON bytes encoding)
#     SS / NS / BS   → sorted list
#     L / M          → list / dict (recursively)
#
# ==============================================

import base64
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Dict

from boto3.dynamodb.types import Binary, TypeDeserializer, TypeSerializer


# Exceptions the boto3 type (de)serializers raise for unusable values
CODEC_ERRORS = (TypeError, ValueError, AttributeError, KeyError, ArithmeticError)


class AttributeCodec:
    def __init__(self):
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    def document_to_attribute_map(self, document: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
        if not isinstance(document, dict):
            raise TypeError(f"Document must be a dictionary, got {type(document).__name__}")

        attribute_map = {}
        for key, value in document.items():
            attribute_map[key] = self._serializer.serialize(self._to_dynamo(value))
        return attribute_map

    def attribute_map_to_document(self, attribute_map: Mapping) -> Dict[str, Any]:
        document = {}
        for key, value in attribute_map.items():
            if not isinstance(key, str):
                raise TypeError(f"Attribute name must be a string, got {type(key).__name__}")
            document[key] = self._from_dynamo(self._deserializer.deserialize(value))
        return document

    def _to_dynamo(self, value: Any) -> Any:
        if isinstance(value, float):
            return Decimal(repr(value))

        if isinstance(value, dict):
            return {k: self._to_dynamo(v) for k, v in value.items()}

        if isinstance(value, list):
            return [self._to_dynamo(item) for item in value]

        return value

    def _from_dynamo(self, value: Any) -> Any:
        if isinstance(value, Decimal):
            # -0.0 keeps its sign as a float
            if value == value.to_integral_value() and not (value.is_zero() and value.is_signed()):
                return int(value)
            return float(value)

        if isinstance(value, Binary):
            return base64.b64encode(value.value).decode("ascii")

        if isinstance(value, (bytes, bytearray)):
            return base64.b64encode(bytes(value)).decode("ascii")

        if isinstance(value, (set, frozenset)):
            return sorted(self._from_dynamo(item) for item in value)

        if isinstance(value, dict):
            return {k: self._from_dynamo(v) for k, v in value.items()}

        if isinstance(value, list):
            return [self._from_dynamo(item) for item in value]

        return value
