from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from chronicler.core.errors import ChroniclerError, ErrorKind

# signed 64-bit range accepted for parsed values
MIN_VALUE = -(2**63)
MAX_VALUE = 2**63 - 1


class ParsedLists(BaseModel):
    """Two equal-length, non-empty integer columns.

    The columns are stored as tuples so the value cannot change after
    construction. Broken invariants raise ``ChroniclerError`` rather than a
    pydantic ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    list1: tuple[StrictInt, ...]
    list2: tuple[StrictInt, ...]

    @model_validator(mode="after")
    def _check_invariants(self) -> ParsedLists:
        if len(self.list1) != len(self.list2):
            raise ChroniclerError(
                ErrorKind.LENGTH_MISMATCH,
                f"Parsed lists must have equal length (got {len(self.list1)} and {len(self.list2)})",
                {"list1_length": len(self.list1), "list2_length": len(self.list2)},
            )
        if not self.list1:
            raise ChroniclerError(ErrorKind.EMPTY_INPUT, "Parsed lists must not be empty")
        for name, values in (("list1", self.list1), ("list2", self.list2)):
            for index, value in enumerate(values):
                if not MIN_VALUE <= value <= MAX_VALUE:
                    raise ChroniclerError(
                        ErrorKind.INVALID_FORMAT,
                        f"Value in {name} at position {index} is outside the 64-bit integer range",
                        {"list": name, "position": index},
                    )
        return self

    @property
    def row_count(self) -> int:
        return len(self.list1)


class DistancePair(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    position: int = Field(ge=0)
    value1: int = Field(alias="list1Value")
    value2: int = Field(alias="list2Value")
    distance: int = Field(ge=0)


class CalculationMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    original_list1_length: int = Field(alias="originalList1Length")
    original_list2_length: int = Field(alias="originalList2Length")
    processing_time_ms: float = Field(alias="processingTimeMs")
    # only measured while tracemalloc is tracing
    memory_used_mb: float | None = Field(default=None, alias="memoryUsedMB")
    algorithm_complexity: str | None = Field(default=None, alias="algorithmComplexity")


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_distance: int = Field(alias="totalDistance", ge=0)
    pairs: list[DistancePair]
    metadata: CalculationMetadata

    @property
    def pair_count(self) -> int:
        return len(self.pairs)

    def to_wire(self) -> dict[str, object]:
        """Return the camelCase mapping used by the API and the JSON export."""
        return self.model_dump(by_alias=True, exclude_none=True)
