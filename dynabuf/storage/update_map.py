# ==============================================
# Update Map
# ==============================================
#
# PURPOSE:
#   Turn an encoded attribute map into the update arguments of an
#   UpdateItem call, for partial updates of an existing item.
#
# FUNCTIONS:
# ----------
# - to_update_map(attribute_map) -> dict
#     Legacy AttributeUpdates shape. Every key is kept; every value
#     becomes {"Value": value, "Action": "PUT"}.
#
# - to_update_expression(attribute_map, exclude=()) -> dict
#     Expression shape: UpdateExpression, ExpressionAttributeNames,
#     ExpressionAttributeValues. Keys in exclude (the primary key) are
#     left out because DynamoDB refuses to update them.
#
# ==============================================

from enum import Enum
from typing import Any, Dict, Iterable, Mapping


class UpdateAction(Enum):
    """
    Update actions on a single attribute.

    SET replaces the attribute with the given value. Its wire value
    is DynamoDB's AttributeAction "PUT".
    """
    SET = "PUT"


def to_update_map(attribute_map: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    updates = {}
    for name, value in attribute_map.items():
        updates[name] = {
            "Value": value,
            "Action": UpdateAction.SET.value
        }
    return updates


def to_update_expression(attribute_map: Mapping[str, Any], exclude: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Build UpdateItem expression arguments that SET every attribute.

    Attribute names go through placeholders (#f0, #f1, ...) so that
    reserved words and dotted names are never parsed as paths.

    Returns:
        Keyword arguments for UpdateItem. An empty dict if nothing is
        left to update.
    """
    skipped = set(exclude)
    assignments = []
    names = {}
    values = {}

    for position, (name, value) in enumerate(
        (name, value) for name, value in attribute_map.items() if name not in skipped
    ):
        names[f"#f{position}"] = name
        values[f":v{position}"] = value
        assignments.append(f"#f{position} = :v{position}")

    if not assignments:
        return {}

    return {
        "UpdateExpression": "SET " + ", ".join(assignments),
        "ExpressionAttributeNames": names,
        "ExpressionAttributeValues": values
    }
