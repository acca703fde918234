# ==============================================
# Dynabuf — Orchestrator
# ==============================================
#
# PURPOSE:
#   The class users interact with. Wires the four topics together
#   behind three operations.
#
# HOW IT CONNECTS THE TOPICS:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                        Dynabuf                           │
#   │                                                          │
#   │  marshal(value)                                          │
#   │    TOPIC 1: ShapeDetector.detect_input                   │
#   │    TOPIC 3: Encoder ── TOPIC 2: DocumentCodec            │
#   │                     └─ TOPIC 2: AttributeCodec           │
#   │                                                          │
#   │  unmarshal(attributes, output)                           │
#   │    TOPIC 1: ShapeDetector.detect_output / _attributes    │
#   │    TOPIC 3: Decoder ── TOPIC 2: AttributeCodec           │
#   │                     └─ TOPIC 2: DocumentCodec            │
#   │                                                          │
#   │  to_update_map(attribute_map)                            │
#   │    TOPIC 4: storage.update_map                           │
#   └──────────────────────────────────────────────────────────┘
#
# CLASS: Dynabuf
# --------------
#   Constructor:
#   ------------
#   - __init__(config: DynabufConfig | None = None)
#       1. Load config (from .env or passed in)
#       2. Build the two codecs from config.codec
#       3. Build the Encoder and Decoder on top of them
#
#   Methods:
#   --------
#   - marshal(value) -> dict | list[dict]
#   - unmarshal(attributes, output) -> None
#   - to_update_map(attribute_map) -> dict
#
# ==============================================

from typing import Any, Dict, List, Mapping, Optional, Union

from dynabuf.codecs.attribute_codec import AttributeCodec
from dynabuf.codecs.document_codec import DocumentCodec
from dynabuf.config import DynabufConfig, get_config
from dynabuf.conversion.decoder import Decoder
from dynabuf.conversion.encoder import AttributeMap, Encoder
from dynabuf.storage.update_map import to_update_map


class Dynabuf:
    """
    Converts protobuf messages to DynamoDB attribute maps and back.

    Example:
        codec = Dynabuf()
        item = codec.marshal(Struct(fields={...}))
        restored = Struct()
        codec.unmarshal(item, restored)
    """

    def __init__(self, config: Optional[DynabufConfig] = None):
        self._config = config or get_config()
        self._document_codec = DocumentCodec(self._config.codec)
        self._attribute_codec = AttributeCodec()
        self._encoder = Encoder(self._document_codec, self._attribute_codec)
        self._decoder = Decoder(self._document_codec, self._attribute_codec)

    @property
    def config(self) -> DynabufConfig:
        return self._config

    def marshal(self, value: Any) -> Union[AttributeMap, List[AttributeMap]]:
        """
        Encode a message, or a collection of messages, to attribute map(s).

        Args:
            value: A protobuf message, a list/tuple/RecordCollection of
                messages of one concrete type, or a tagged input

        Returns:
            A single attribute map, or a list of them in input order

        Raises:
            DynabufError: FAILED_TO_MARSHAL wrapping the cause
        """
        return self._encoder.encode(value)

    def unmarshal(self, attributes: Any, output: Any) -> None:
        """
        Decode attribute map(s) into output.

        Args:
            attributes: An attribute map, or a list of attribute maps
            output: A message to populate, or a RecordCollection to append to

        Raises:
            DynabufError: FAILED_TO_UNMARSHAL wrapping the cause
        """
        self._decoder.decode(attributes, output)

    def to_update_map(self, attribute_map: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
        return to_update_map(attribute_map)
