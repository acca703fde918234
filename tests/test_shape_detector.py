# ==============================================
# Tests for Classification Module
# ==============================================

import pytest
from google.protobuf.struct_pb2 import Struct
from google.protobuf.timestamp_pb2 import Timestamp

from dynabuf.classification import (
    RecordCollection,
    RecordCollectionInput,
    RecordInput,
    Shape,
    ShapeDetector,
)
from dynabuf.errors import DynabufError, ErrorKind


class TestCapabilityChecks:
    def test_message_is_record(self, hello_struct):
        """A protobuf message satisfies the record capability."""
        assert ShapeDetector.is_record(hello_struct) is True

    def test_plain_values_are_not_records(self):
        """dicts, strings and numbers are not records."""
        assert ShapeDetector.is_record({"bar": "hello world"}) is False
        assert ShapeDetector.is_record("hello") is False
        assert ShapeDetector.is_record(42) is False

    def test_record_type_probed_with_zero_value(self, person_type):
        """Message classes pass the zero-value probe, other types do not."""
        assert ShapeDetector.is_record_type(person_type) is True
        assert ShapeDetector.is_record_type(Struct) is True
        assert ShapeDetector.is_record_type(dict) is False
        assert ShapeDetector.is_record_type(None) is False


class TestDetectInput:
    def test_single_record(self, hello_struct):
        """A message is tagged as a single record."""
        tagged = ShapeDetector.detect_input(hello_struct)
        assert isinstance(tagged, RecordInput)
        assert tagged.shape is Shape.RECORD
        assert tagged.record is hello_struct

    def test_list_of_records(self, sample_people, person_type):
        """A list of one message type is a typed collection, in order."""
        tagged = ShapeDetector.detect_input(sample_people)
        assert isinstance(tagged, RecordCollectionInput)
        assert tagged.shape is Shape.COLLECTION
        assert tagged.record_type is person_type
        assert list(tagged.records) == sample_people

    def test_tuple_of_records(self, sample_people):
        """Tuples are accepted like lists."""
        tagged = ShapeDetector.detect_input(tuple(sample_people))
        assert len(tagged) == 3

    def test_empty_list_is_untyped_collection(self):
        """An empty list is a collection with no element type."""
        tagged = ShapeDetector.detect_input([])
        assert tagged == RecordCollectionInput(None, ())

    def test_empty_record_collection_keeps_its_type(self, person_type):
        """RecordCollection stays typed even when empty."""
        tagged = ShapeDetector.detect_input(RecordCollection(person_type))
        assert tagged.record_type is person_type
        assert len(tagged) == 0

    def test_tagged_input_passes_through(self, hello_struct):
        """Callers may hand over an already classified input."""
        tagged = RecordInput(hello_struct)
        assert ShapeDetector.detect_input(tagged) is tagged

    def test_tagged_collection_is_checked(self, sample_people, person_type):
        tagged = RecordCollectionInput(person_type, tuple(sample_people))
        assert ShapeDetector.detect_input(tagged) == tagged

    def test_tagged_record_must_be_a_message(self):
        """A RecordInput around a non-message is INVALID_INPUT."""
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input(RecordInput(42))
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT

    def test_tagged_collection_must_be_homogeneous(self, hello_struct):
        """Mixed types inside a RecordCollectionInput are INVALID_INPUT."""
        tagged = RecordCollectionInput(Struct, (hello_struct, Timestamp()))
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input(tagged)
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT
        assert excinfo.value.index == 1

    def test_untyped_tagged_collection_must_be_empty(self):
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input(RecordCollectionInput(None, (1, 2)))
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT
        assert ShapeDetector.detect_input(RecordCollectionInput(None, ())) == RecordCollectionInput(None, ())

    def test_tagged_collection_with_non_message_type(self):
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input(RecordCollectionInput(dict, ({},)))
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT

    @pytest.mark.parametrize("value", [42, "hello", {"bar": "hello world"}, None, 1.5])
    def test_non_record_rejected(self, value):
        """Anything else is INVALID_INPUT."""
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input(value)
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT

    def test_invalid_input_names_runtime_type(self):
        """The error detail names the offending type."""
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input(42)
        assert "builtins.int" in str(excinfo.value)

    def test_list_of_non_records_rejected(self):
        """A list whose element type is not a message is INVALID_INPUT."""
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input([1, 2, 3])
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT

    def test_heterogeneous_collection_rejected(self, hello_struct):
        """Mixing message types is INVALID_INPUT, pointing at the first stranger."""
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input([hello_struct, Struct(), Timestamp()])
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT
        assert excinfo.value.index == 2
        assert "heterogeneous" in str(excinfo.value)

    def test_record_collection_with_wrong_element(self, person_type, hello_struct):
        """RecordCollection elements must match its declared type."""
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input(RecordCollection(person_type, [hello_struct]))
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT
        assert excinfo.value.index == 0

    def test_record_collection_with_non_message_type(self):
        """A RecordCollection of a non-message type is INVALID_INPUT."""
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_input(RecordCollection(dict))
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT


class TestDetectOutput:
    def test_message_instance_is_single_target(self, hello_struct):
        assert ShapeDetector.detect_output(hello_struct) is Shape.RECORD

    def test_record_collection_is_collection_target(self, person_type):
        assert ShapeDetector.detect_output(RecordCollection(person_type)) is Shape.COLLECTION

    @pytest.mark.parametrize("target", [Struct, [], {}, None, "out"])
    def test_non_targets_rejected(self, target):
        """Message classes, plain lists and other values are INVALID_OUTPUT."""
        with pytest.raises(DynabufError) as excinfo:
            ShapeDetector.detect_output(target)
        assert excinfo.value.kind is ErrorKind.INVALID_OUTPUT


class TestDetectAttributes:
    def test_mapping_is_single(self):
        assert ShapeDetector.detect_attributes({"bar": {"S": "x"}}) is Shape.RECORD

    def test_list_of_mappings_is_collection(self):
        assert ShapeDetector.detect_attributes([{"bar": {"S": "x"}}, {}]) is Shape.COLLECTION

    def test_empty_list_is_collection(self):
        assert ShapeDetector.detect_attributes([]) is Shape.COLLECTION

    def test_unsupported_attribute_input(self):
        """Strings and lists of non-mappings are INVALID_OUTPUT."""
        for attributes in ("bar", 3, [{"bar": {"S": "x"}}, "oops"]):
            with pytest.raises(DynabufError) as excinfo:
                ShapeDetector.detect_attributes(attributes)
            assert excinfo.value.kind is ErrorKind.INVALID_OUTPUT
