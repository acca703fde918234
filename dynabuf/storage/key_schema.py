# ==============================================
# KeySchema
# ==============================================
#
# PURPOSE:
#   Primary-key helpers for encoded items: pull the key attributes
#   out of an attribute map, and describe a table keyed on them.
#
# WHY THIS CLASS EXISTS:
#   GetItem, UpdateItem and DeleteItem all take the item's primary
#   key as its own attribute map, and create_table needs the key
#   attributes' scalar types. Both are derived from the same encoded
#   item Marshal returns, so callers never hand-write them. No I/O
#   is performed here; the results are plain keyword arguments for
#   the store client.
#
# CLASS: KeySchema
# ----------------
#   Constructor:
#   ------------
#   - __init__(partition_key: str, sort_key: str | None = None)
#
#   Methods:
#   --------
#   - key_names() -> list[str]
#   - key(attribute_map) -> dict
#   - attribute_definitions(sample) -> list[dict]
#   - table_definition(table_name, sample, billing_mode, ...) -> dict
#
# ENUM: BillingMode
# -----------------
#   PAY_PER_REQUEST (default) or PROVISIONED.
#
# ==============================================

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


KEY_ATTRIBUTE_TYPES = {"S", "N", "B"}


class BillingMode(Enum):
    PAY_PER_REQUEST = "PAY_PER_REQUEST"
    PROVISIONED = "PROVISIONED"


class KeySchema:
    """Partition key, plus an optional sort key, of one table."""

    def __init__(self, partition_key: str, sort_key: Optional[str] = None):
        if not partition_key:
            raise ValueError("Partition key name is required")
        if sort_key == partition_key:
            raise ValueError("Sort key must differ from the partition key")
        self.partition_key = partition_key
        self.sort_key = sort_key

    def key_names(self) -> List[str]:
        names = [self.partition_key]
        if self.sort_key:
            names.append(self.sort_key)
        return names

    def key(self, attribute_map: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Extract the primary key of an encoded item.

        Raises:
            KeyError: If a key attribute is missing from the item
        """
        key = {}
        for name in self.key_names():
            if name not in attribute_map:
                raise KeyError(f"Key attribute '{name}' is missing from the item")
            key[name] = attribute_map[name]
        return key

    def attribute_definitions(self, sample: Mapping[str, Any]) -> List[Dict[str, str]]:
        """
        AttributeDefinitions for the key attributes, typed from a sample item.

        Raises:
            KeyError: If a key attribute is missing from the sample
            ValueError: If a key attribute is not a string, number or binary
        """
        definitions = []
        for name, value in self.key(sample).items():
            attribute_type = self._scalar_type(name, value)
            definitions.append({
                "AttributeName": name,
                "AttributeType": attribute_type
            })
        return definitions

    def table_definition(
        self,
        table_name: str,
        sample: Mapping[str, Any],
        billing_mode: BillingMode = BillingMode.PAY_PER_REQUEST,
        read_capacity: int = 5,
        write_capacity: int = 5
    ) -> Dict[str, Any]:
        """Keyword arguments for a create_table call."""
        key_schema = [{"AttributeName": self.partition_key, "KeyType": "HASH"}]
        if self.sort_key:
            key_schema.append({"AttributeName": self.sort_key, "KeyType": "RANGE"})

        definition = {
            "TableName": table_name,
            "KeySchema": key_schema,
            "AttributeDefinitions": self.attribute_definitions(sample),
            "BillingMode": billing_mode.value
        }

        if billing_mode is BillingMode.PROVISIONED:
            definition["ProvisionedThroughput"] = {
                "ReadCapacityUnits": read_capacity,
                "WriteCapacityUnits": write_capacity
            }

        return definition

    def _scalar_type(self, name: str, value: Any) -> str:
        if isinstance(value, Mapping) and len(value) == 1:
            attribute_type = next(iter(value))
            if attribute_type in KEY_ATTRIBUTE_TYPES:
                return attribute_type
        raise ValueError(f"Key attribute '{name}' must be a string, number or binary, got {value!r}")

    def __repr__(self) -> str:
        return f"KeySchema(partition_key={self.partition_key!r}, sort_key={self.sort_key!r})"
