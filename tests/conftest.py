# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# This file contains shared fixtures for all tests.
#
# Test messages are described with a FileDescriptorProto and added
# to the default descriptor pool at import time, so no generated
# *_pb2 module is needed:
#
#   package dynabuf.test;
#
#   enum Status { STATUS_UNSPECIFIED = 0; ACTIVE = 1; SUSPENDED = 2; }
#
#   message Address {
#     string street = 1;
#     string postal_code = 2;
#   }
#
#   message Person {
#     string name = 1;
#     int32 age = 2;
#     double score = 3;
#     int64 id = 4;
#     repeated string tags = 5;
#     bool active = 6;
#     bytes avatar = 7;
#     Status status = 8;
#     Address home_address = 9;
#     google.protobuf.Timestamp created_at = 10;
#     map<string, string> labels = 11;
#   }
#
# FIXTURES:
# ---------
# - person_type / address_type   → the message classes
# - sample_person                → a fully populated Person
# - sample_people                → three distinct Persons
# - hello_struct                 → Struct {"bar": "hello world"}
# - config                       → default DynabufConfig (no .env)
# - codec                        → Dynabuf built on that config
# ==============================================

import pytest
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf import timestamp_pb2  # noqa: F401  registers timestamp.proto in the default pool
from google.protobuf.struct_pb2 import Struct

from dynabuf import Dynabuf, DynabufConfig


TEST_FILE = "dynabuf/test/person.proto"
FieldProto = descriptor_pb2.FieldDescriptorProto


def _add_field(message, name, json_name, number, field_type, type_name=None, repeated=False):
    field = message.field.add(
        name=name,
        json_name=json_name,
        number=number,
        type=field_type,
        label=FieldProto.LABEL_REPEATED if repeated else FieldProto.LABEL_OPTIONAL
    )
    if type_name:
        field.type_name = type_name
    return field


def _build_test_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=TEST_FILE,
        package="dynabuf.test",
        syntax="proto3"
    )
    file_proto.dependency.append("google/protobuf/timestamp.proto")

    status = file_proto.enum_type.add(name="Status")
    status.value.add(name="STATUS_UNSPECIFIED", number=0)
    status.value.add(name="ACTIVE", number=1)
    status.value.add(name="SUSPENDED", number=2)

    address = file_proto.message_type.add(name="Address")
    _add_field(address, "street", "street", 1, FieldProto.TYPE_STRING)
    _add_field(address, "postal_code", "postalCode", 2, FieldProto.TYPE_STRING)

    person = file_proto.message_type.add(name="Person")
    labels_entry = person.nested_type.add(name="LabelsEntry")
    labels_entry.options.map_entry = True
    _add_field(labels_entry, "key", "key", 1, FieldProto.TYPE_STRING)
    _add_field(labels_entry, "value", "value", 2, FieldProto.TYPE_STRING)

    _add_field(person, "name", "name", 1, FieldProto.TYPE_STRING)
    _add_field(person, "age", "age", 2, FieldProto.TYPE_INT32)
    _add_field(person, "score", "score", 3, FieldProto.TYPE_DOUBLE)
    _add_field(person, "id", "id", 4, FieldProto.TYPE_INT64)
    _add_field(person, "tags", "tags", 5, FieldProto.TYPE_STRING, repeated=True)
    _add_field(person, "active", "active", 6, FieldProto.TYPE_BOOL)
    _add_field(person, "avatar", "avatar", 7, FieldProto.TYPE_BYTES)
    _add_field(person, "status", "status", 8, FieldProto.TYPE_ENUM, ".dynabuf.test.Status")
    _add_field(person, "home_address", "homeAddress", 9, FieldProto.TYPE_MESSAGE, ".dynabuf.test.Address")
    _add_field(person, "created_at", "createdAt", 10, FieldProto.TYPE_MESSAGE, ".google.protobuf.Timestamp")
    _add_field(
        person, "labels", "labels", 11, FieldProto.TYPE_MESSAGE,
        ".dynabuf.test.Person.LabelsEntry", repeated=True
    )
    return file_proto


def _register_test_messages():
    pool = descriptor_pool.Default()
    try:
        pool.FindFileByName(TEST_FILE)
    except KeyError:
        pool.AddSerializedFile(_build_test_file().SerializeToString())
    person = message_factory.GetMessageClass(pool.FindMessageTypeByName("dynabuf.test.Person"))
    address = message_factory.GetMessageClass(pool.FindMessageTypeByName("dynabuf.test.Address"))
    return person, address


Person, Address = _register_test_messages()

STATUS_ACTIVE = 1


# ==============================================
# Fixtures
# ==============================================

@pytest.fixture
def person_type():
    return Person


@pytest.fixture
def address_type():
    return Address


@pytest.fixture
def sample_person():
    """A Person with every field populated."""
    person = Person(
        name="Ada Lovelace",
        age=36,
        score=97.5,
        id=9007199254740993,
        tags=["math", "engines"],
        active=True,
        avatar=b"\x00\x01",
        status=STATUS_ACTIVE,
        home_address=Address(street="12 St James's Square", postal_code="380015")
    )
    person.created_at.seconds = 1700000000
    person.labels["team"] = "analytical"
    return person


@pytest.fixture
def sample_people():
    """Three distinct Persons, in a known order."""
    return [
        Person(name="alice", age=30, tags=["a"]),
        Person(name="bob", age=41, score=1.25),
        Person(name="carol", active=True, id=7)
    ]


@pytest.fixture
def hello_struct():
    """Struct {"bar": "hello world"}."""
    struct = Struct()
    struct.update({"bar": "hello world"})
    return struct


@pytest.fixture
def config():
    return DynabufConfig()


@pytest.fixture
def codec(config):
    return Dynabuf(config)
