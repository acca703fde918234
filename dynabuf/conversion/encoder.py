# ==============================================
# Encoder
# ==============================================
#
# PURPOSE:
#   The encode pipeline. Turns one protobuf message into one
#   DynamoDB attribute map, or a homogeneous collection of messages
#   into a list of attribute maps in the same order.
#
# HOW IT WORKS:
#
#   value
#     │  ShapeDetector.detect_input
#     ▼
#   RecordInput | RecordCollectionInput
#     │  (per record, in order)
#     ▼
#   DocumentCodec.record_to_document      ── fails → FAILED_TO_MARSHAL
#     │                                            ← FAILED_TO_MARSHAL_INTERMEDIARY
#     ▼
#   AttributeCodec.document_to_attribute_map ── fails → FAILED_TO_MARSHAL
#     │
#     ▼
#   attribute map | list[attribute map]
#
#   A collection is all-or-nothing: the first failing element aborts
#   the call with its index and no partial list is returned.
#
# ==============================================

import logging
from typing import Any, Dict, List, Optional, Union

from google.protobuf.message import Message

from dynabuf.classification.shape_detector import ShapeDetector
from dynabuf.classification.shapes import RecordCollectionInput, RecordInput
from dynabuf.codecs.attribute_codec import CODEC_ERRORS as ATTRIBUTE_ERRORS, AttributeCodec
from dynabuf.codecs.document_codec import CODEC_ERRORS as DOCUMENT_ERRORS, DocumentCodec
from dynabuf.errors import DynabufError, ErrorKind, wrap

logger = logging.getLogger(__name__)

AttributeMap = Dict[str, Dict[str, Any]]


class Encoder:
    def __init__(
        self,
        document_codec: Optional[DocumentCodec] = None,
        attribute_codec: Optional[AttributeCodec] = None
    ):
        self.document_codec = document_codec or DocumentCodec()
        self.attribute_codec = attribute_codec or AttributeCodec()

    def encode(self, value: Any) -> Union[AttributeMap, List[AttributeMap]]:
        """
        Encode a message or a collection of messages.

        Args:
            value: A protobuf message, a list/tuple/RecordCollection of
                messages of one type, or an already tagged input

        Returns:
            One attribute map for a record, a list of them for a collection

        Raises:
            DynabufError: kind FAILED_TO_MARSHAL, wrapping the cause
        """
        try:
            tagged = ShapeDetector.detect_input(value)
        except DynabufError as e:
            logger.debug("Rejected marshal input: %s", e)
            raise wrap(ErrorKind.FAILED_TO_MARSHAL, e) from e

        if isinstance(tagged, RecordInput):
            logger.debug("Marshaling %s", tagged.record.DESCRIPTOR.full_name)
            return self.encode_record(tagged.record)

        return self.encode_collection(tagged)

    def encode_collection(self, collection: RecordCollectionInput) -> List[AttributeMap]:
        logger.debug("Marshaling collection of %d record(s)", len(collection))
        result = []
        for index, record in enumerate(collection.records):
            try:
                result.append(self.encode_record(record))
            except DynabufError as e:
                logger.debug("Marshal failed at index %d: %s", index, e)
                raise wrap(ErrorKind.FAILED_TO_MARSHAL, e, index=index) from e
        return result

    def encode_record(self, record: Message) -> AttributeMap:
        try:
            document = self.document_codec.record_to_document(record)
        except DOCUMENT_ERRORS as e:
            intermediary = wrap(ErrorKind.FAILED_TO_MARSHAL_INTERMEDIARY, e)
            raise wrap(ErrorKind.FAILED_TO_MARSHAL, intermediary) from intermediary

        try:
            return self.attribute_codec.document_to_attribute_map(document)
        except ATTRIBUTE_ERRORS as e:
            raise wrap(ErrorKind.FAILED_TO_MARSHAL, e) from e
