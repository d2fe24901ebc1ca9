"""Result type for FileKit operations.

Provides an immutable tagged union of "ok value" and "failure kind".
Operations never raise: the outcome is captured in the result.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from filekit.core.errors import FileKitError

T = TypeVar("T")


class FileKitResult(BaseModel, Generic[T]):
    """Outcome of a single FileKit operation.

    Attributes:
        ok: Whether the operation succeeded
        value: Operation value (if ok=True)
        error: Failure kind with its location (if ok=False)

    Example:
        >>> result = kit.load_file(file)
        >>> if result.ok:
        ...     print(result.value.data)
        ... else:
        ...     print(f"Error: {result.error}")
    """

    ok: bool = Field(description="Whether the operation succeeded")
    value: T | None = Field(default=None, description="Operation value (if ok)")
    error: FileKitError | None = Field(default=None, description="Failure (if not ok)")

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def _check_exclusive(self) -> FileKitResult[T]:
        if self.ok and self.error is not None:
            raise ValueError("Successful result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("Failed result must carry an error")
        return self

    def unwrap(self) -> T:
        """Return the value, or raise the carried error.

        Raises:
            FileKitError: The failure kind of a failed result
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


# Helper functions to create results (avoids Pydantic classmethod issues)


def success(value: Any) -> FileKitResult[Any]:
    """Create a successful result carrying value."""
    return FileKitResult(ok=True, value=value)


def failure(error: FileKitError) -> FileKitResult[Any]:
    """Create a failed result carrying error."""
    return FileKitResult(ok=False, error=error)
