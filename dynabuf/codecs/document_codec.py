# ==============================================
# DocumentCodec
# ==============================================
#
# PURPOSE:
#   Convert a protobuf message to its canonical document (the proto3
#   JSON mapping as a plain dict) and back.
#
# WHY THIS CLASS EXISTS:
#   The canonical document is the pivot between the typed world
#   (messages) and the untyped world (attribute maps). Keeping it in
#   its own class lets the pipelines tell a schema-mapping failure
#   apart from an attribute-encoding failure.
#
# CLASS: DocumentCodec
# --------------------
#   Stateless apart from its CodecConfig.
#
#   Methods:
#   --------
#   - record_to_document(record: Message) -> dict
#       json_format.MessageToDict with the configured options.
#       Raises TypeError if the message does not map to a JSON object
#       (e.g. a top-level Timestamp maps to a string).
#
#   - document_to_record(document: dict, record: Message) -> Message
#       json_format.ParseDict into the given message.
#
# ==============================================

from typing import Any, Dict, Optional

from google.protobuf import json_format
from google.protobuf.message import Message

from dynabuf.config import CodecConfig


# Exceptions json_format raises for documents that do not fit a schema
CODEC_ERRORS = (json_format.Error, TypeError, ValueError)


class DocumentCodec:
    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    def record_to_document(self, record: Message) -> Dict[str, Any]:
        document = json_format.MessageToDict(
            record,
            always_print_fields_with_no_presence=self.config.always_print_fields_with_no_presence,
            preserving_proto_field_name=self.config.preserving_proto_field_name,
            use_integers_for_enums=self.config.use_integers_for_enums
        )
        if not isinstance(document, dict):
            raise TypeError(
                f"{record.DESCRIPTOR.full_name} maps to a JSON {type(document).__name__}, not an object"
            )
        return document

    def document_to_record(self, document: Dict[str, Any], record: Message) -> Message:
        return json_format.ParseDict(
            document,
            record,
            ignore_unknown_fields=self.config.ignore_unknown_fields
        )
