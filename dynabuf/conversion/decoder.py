# ==============================================
# Decoder
# ==============================================
#
# PURPOSE:
#   The decode pipeline. Reads one attribute map (or a list of them)
#   back into a caller-supplied destination: a protobuf message, or a
#   RecordCollection the decoded messages are appended to.
#
# HOW IT WORKS:
#
#   1. ShapeDetector.detect_output(output)        → RECORD | COLLECTION
#      ShapeDetector.detect_attributes(attributes) → RECORD | COLLECTION
#      Either fails, or the two shapes differ → INVALID_OUTPUT.
#      Nothing has been decoded yet at this point.
#
#   2. AttributeCodec.attribute_map_to_document  ── fails → FAILED_TO_UNMARSHAL
#
#   3. DocumentCodec.document_to_record           ── fails → FAILED_TO_UNMARSHAL
#                                                         ← FAILED_TO_UNMARSHAL_INTERMEDIARY
#
#   Every record is built in a fresh message of the destination type.
#   The destination is only written once the whole call succeeded:
#     - single:     output.CopyFrom(decoded)
#     - collection: output.extend(decoded_records)
#
# ==============================================

import logging
from typing import Any, List, Mapping, Optional, Sequence, Type

from google.protobuf.message import Message

from dynabuf.classification.shape_detector import ShapeDetector
from dynabuf.classification.shapes import Shape, type_name
from dynabuf.codecs.attribute_codec import CODEC_ERRORS as ATTRIBUTE_ERRORS, AttributeCodec
from dynabuf.codecs.document_codec import CODEC_ERRORS as DOCUMENT_ERRORS, DocumentCodec
from dynabuf.errors import DynabufError, ErrorKind, wrap

logger = logging.getLogger(__name__)


class Decoder:
    def __init__(
        self,
        document_codec: Optional[DocumentCodec] = None,
        attribute_codec: Optional[AttributeCodec] = None
    ):
        self.document_codec = document_codec or DocumentCodec()
        self.attribute_codec = attribute_codec or AttributeCodec()

    def decode(self, attributes: Any, output: Any) -> None:
        """
        Decode attribute map(s) into output.

        Args:
            attributes: One attribute map, or a list/tuple of attribute maps
            output: A protobuf message (single) or a RecordCollection

        Raises:
            DynabufError: kind FAILED_TO_UNMARSHAL, wrapping the cause.
                Callers must discard output on error.
        """
        try:
            shape = self._check_shapes(attributes, output)
        except DynabufError as e:
            logger.debug("Rejected unmarshal destination: %s", e)
            raise wrap(ErrorKind.FAILED_TO_UNMARSHAL, e) from e

        if shape is Shape.RECORD:
            logger.debug("Unmarshaling into %s", output.DESCRIPTOR.full_name)
            decoded = self.decode_record(attributes, type(output))
            output.CopyFrom(decoded)
            return

        output.extend(self.decode_collection(attributes, output.record_type))

    def decode_collection(self, items: Sequence[Mapping], record_type: Type[Message]) -> List[Message]:
        logger.debug("Unmarshaling %d item(s) into %s", len(items), record_type.DESCRIPTOR.full_name)
        records = []
        for index, item in enumerate(items):
            try:
                records.append(self.decode_record(item, record_type))
            except DynabufError as e:
                logger.debug("Unmarshal failed at index %d: %s", index, e)
                raise wrap(ErrorKind.FAILED_TO_UNMARSHAL, e, index=index) from e
        return records

    def decode_record(self, attribute_map: Mapping, record_type: Type[Message]) -> Message:
        try:
            document = self.attribute_codec.attribute_map_to_document(attribute_map)
        except ATTRIBUTE_ERRORS as e:
            raise wrap(ErrorKind.FAILED_TO_UNMARSHAL, e) from e

        record = record_type()
        try:
            self.document_codec.document_to_record(document, record)
        except DOCUMENT_ERRORS as e:
            intermediary = wrap(ErrorKind.FAILED_TO_UNMARSHAL_INTERMEDIARY, e)
            raise wrap(ErrorKind.FAILED_TO_UNMARSHAL, intermediary) from intermediary
        return record

    def _check_shapes(self, attributes: Any, output: Any) -> Shape:
        output_shape = ShapeDetector.detect_output(output)
        input_shape = ShapeDetector.detect_attributes(attributes)
        if input_shape is not output_shape:
            raise DynabufError(
                ErrorKind.INVALID_OUTPUT,
                f"{input_shape.value} input cannot be decoded into {type_name(output)}"
            )
        return output_shape
