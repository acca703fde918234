# ==============================================
# dynabuf
# ==============================================
#
# Protocol Buffers ⇄ DynamoDB attribute values, using the proto3
# JSON document as the intermediary.
#
# Package Structure (4 Topics + Orchestrator):
#
# dynabuf/
# ├── classification/  # Topic 1: Record / collection shape detection
# ├── codecs/          # Topic 2: Document codec + attribute codec
# ├── conversion/      # Topic 3: Encode and decode pipelines
# ├── storage/         # Topic 4: Update maps and key helpers
# ├── errors.py        # Error taxonomy
# ├── config.py        # Configuration management
# └── converter.py     # Dynabuf orchestrator class
#
# USAGE:
# ------
#   import dynabuf
#   item = dynabuf.marshal(message)
#   dynabuf.unmarshal(item, restored)
#   updates = dynabuf.to_update_map(item)
#
# ==============================================

from typing import Any, Dict, List, Optional, Union

from dynabuf.classification import (
    RecordCollection,
    RecordCollectionInput,
    RecordInput,
    Shape,
    ShapeDetector,
)
from dynabuf.config import DynabufConfig, CodecConfig, LoggingConfig, configure_logging, get_config
from dynabuf.converter import Dynabuf
from dynabuf.errors import DynabufError, ErrorKind, is_kind
from dynabuf.storage import BillingMode, KeySchema, UpdateAction, to_update_expression, to_update_map

__version__ = "0.1.0"


def marshal(value: Any, config: Optional[DynabufConfig] = None) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
    """Encode a message or a homogeneous collection of messages. See Dynabuf.marshal."""
    return Dynabuf(config).marshal(value)


def unmarshal(attributes: Any, output: Any, config: Optional[DynabufConfig] = None) -> None:
    """Decode attribute map(s) into a message or a RecordCollection. See Dynabuf.unmarshal."""
    Dynabuf(config).unmarshal(attributes, output)


__all__ = [
    "marshal",
    "unmarshal",
    "to_update_map",
    "to_update_expression",
    "Dynabuf",
    "DynabufConfig",
    "CodecConfig",
    "LoggingConfig",
    "get_config",
    "configure_logging",
    "DynabufError",
    "ErrorKind",
    "is_kind",
    "RecordCollection",
    "RecordInput",
    "RecordCollectionInput",
    "Shape",
    "ShapeDetector",
    "UpdateAction",
    "KeySchema",
    "BillingMode"
]
