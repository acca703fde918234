# ==============================================
# Error Taxonomy
# ==============================================
#
# PURPOSE:
#   One closed set of error kinds shared by the encode and decode
#   pipelines, so callers can tell apart a bad input shape, a broken
#   schema mapping and a broken attribute encoding without parsing
#   messages.
#
# ENUM: ErrorKind
# ---------------
#   - INVALID_INPUT                    → encode input is not a record / collection
#   - INVALID_OUTPUT                   → decode destination is not a write target,
#                                        or its shape mismatches the input
#   - FAILED_TO_MARSHAL                → top-level wrapper for every encode error
#   - FAILED_TO_UNMARSHAL              → top-level wrapper for every decode error
#   - FAILED_TO_MARSHAL_INTERMEDIARY   → record → document stage failed
#   - FAILED_TO_UNMARSHAL_INTERMEDIARY → document → record stage failed
#
# CLASS: DynabufError
# -------------------
#   Exception carrying (kind, detail, cause, index). Errors compose by
#   wrapping: the outer kind wraps the inner cause through __cause__.
#
# FUNCTION:
# ---------
# - is_kind(exc, kind) -> bool
#       True if exc, or anything in its cause chain, is of that kind.
#
# USAGE:
# ------
#   try:
#       dynabuf.unmarshal(item, output)
#   except DynabufError as e:
#       if e.matches(ErrorKind.FAILED_TO_UNMARSHAL_INTERMEDIARY):
#           ...  # the item does not fit the message schema
#
# ==============================================

from enum import Enum
from typing import Iterator, Optional


class ErrorKind(Enum):
    """Kinds of failure surfaced by Marshal / Unmarshal."""
    INVALID_INPUT = "invalid input, must be a protobuf message or slice of messages"
    INVALID_OUTPUT = "invalid output, must be a protobuf message or a typed collection of messages"
    FAILED_TO_MARSHAL = "failed to marshal protobuf to DynamoDB attribute value"
    FAILED_TO_UNMARSHAL = "failed to unmarshal DynamoDB attribute value to protobuf"
    FAILED_TO_MARSHAL_INTERMEDIARY = "failed to marshal protobuf to intermediary document"
    FAILED_TO_UNMARSHAL_INTERMEDIARY = "failed to unmarshal intermediary document to protobuf"


class DynabufError(Exception):
    """
    A dynabuf failure of a given kind, optionally wrapping a cause.

    Args:
        kind: The ErrorKind of this level of the chain
        detail: Extra context (offending runtime type, stage name, ...)
        cause: The wrapped error, also exposed as __cause__
        index: Position of the failing element in a collection call
    """

    def __init__(
        self,
        kind: ErrorKind,
        detail: Optional[str] = None,
        cause: Optional[BaseException] = None,
        index: Optional[int] = None
    ):
        self.kind = kind
        self.detail = detail
        self.cause = cause
        self.index = index
        self.__cause__ = cause
        super().__init__(self._render())

    def _render(self) -> str:
        parts = [f"dynabuf: {self.kind.value}"]
        if self.index is not None:
            parts.append(f"at index {self.index}")
        if self.detail:
            parts.append(self.detail)
        if self.cause is not None:
            parts.append(str(self.cause))
        return ": ".join(parts)

    def chain(self) -> Iterator[BaseException]:
        """Yield this error and every error it wraps, outermost first."""
        current: Optional[BaseException] = self
        seen = set()
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = current.__cause__

    def matches(self, kind: ErrorKind) -> bool:
        """True if this error or any wrapped error has the given kind."""
        return any(
            isinstance(err, DynabufError) and err.kind is kind
            for err in self.chain()
        )

    @property
    def failing_index(self) -> Optional[int]:
        """Index of the first failing collection element, if any."""
        for err in self.chain():
            if isinstance(err, DynabufError) and err.index is not None:
                return err.index
        return None


def is_kind(exc: BaseException, kind: ErrorKind) -> bool:
    """errors.Is-style membership test for any exception."""
    if isinstance(exc, DynabufError):
        return exc.matches(kind)
    return False


def wrap(kind: ErrorKind, cause: BaseException, index: Optional[int] = None) -> DynabufError:
    """Wrap cause one level with the given kind."""
    return DynabufError(kind, cause=cause, index=index)
