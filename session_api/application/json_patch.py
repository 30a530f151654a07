"""
JSON-Patch application.

Applies RFC 6902 patch documents to plain dicts, all-or-nothing.
The input document is never mutated; a failure on any operation
discards the whole batch.

Dependencies: jsonpatch, jsonpointer
System role: Partial update engine for the PATCH endpoint
"""

import logging
from typing import Any

import jsonpatch
import jsonpointer

from session_api.core.exceptions import PatchError

logger = logging.getLogger(__name__)

IDENTITY_POINTER = "/id"


def _addresses_identity(pointer: Any) -> bool:
    return isinstance(pointer, str) and (
        pointer == IDENTITY_POINTER or pointer.startswith(IDENTITY_POINTER + "/")
    )


def strip_identity_operations(operations: Any) -> Any:
    """
    Drop operations that read or write the identity field.

    Args:
        operations: Patch document as received from the client

    Returns:
        The document without ops whose path or from is /id. Anything that
        is not a list is returned unchanged for apply_patch to reject.
    """
    if not isinstance(operations, list):
        return operations

    kept = []
    for op in operations:
        if isinstance(op, dict) and (
            _addresses_identity(op.get("path")) or _addresses_identity(op.get("from"))
        ):
            logger.debug("Dropping identity patch operation", extra={"operation": op})
            continue
        kept.append(op)
    return kept


def apply_patch(document: dict[str, Any], operations: Any) -> dict[str, Any]:
    """
    Apply a JSON-Patch document to a copy of a dict.

    Every operation is checked for shape when the patch is built, then
    applied in order against a deep copy. The first failing operation
    aborts the whole patch.

    Args:
        document: Current JSON representation of the record
        operations: List of RFC 6902 operation objects

    Returns:
        dict: New document with all operations applied

    Raises:
        PatchError: If the document is malformed or any operation fails
    """
    if not isinstance(operations, list):
        raise PatchError(
            "Patch document must be an array of operations",
            details={"received_type": type(operations).__name__},
        )

    try:
        patch = jsonpatch.JsonPatch(operations)
        patched = patch.apply(document, in_place=False)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as e:
        raise PatchError(f"Invalid patch: {e}") from e
    except (TypeError, AttributeError, KeyError) as e:
        # Operations that are not objects or lack required members
        raise PatchError(f"Malformed patch operation: {e}") from e

    if not isinstance(patched, dict):
        raise PatchError("Patch must not replace the whole document")

    return patched
