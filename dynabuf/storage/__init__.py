# ==============================================
# TOPIC 4: STORAGE HELPERS
# ==============================================
#
# Pure helpers that shape encoded items into the arguments the
# DynamoDB client expects. Nothing here talks to the database.
#
# Modules:
# --------
# - update_map.py   → attribute map → UpdateItem arguments
# - key_schema.py   → primary-key extraction and table definitions
#
# ==============================================

from .update_map import UpdateAction, to_update_map, to_update_expression
from .key_schema import BillingMode, KeySchema

__all__ = [
    "UpdateAction",
    "to_update_map",
    "to_update_expression",
    "BillingMode",
    "KeySchema"
]
