# ==============================================
# TOPIC 2: CODECS
# ==============================================
#
# The two independent stages every conversion goes through.
#
# Modules:
# --------
# - document_codec.py   → protobuf message ⇄ canonical document (proto3 JSON)
# - attribute_codec.py  → canonical document ⇄ DynamoDB attribute map
#
# ==============================================

from .document_codec import DocumentCodec
from .attribute_codec import AttributeCodec

__all__ = ["DocumentCodec", "AttributeCodec"]
