# ruff: noqa: TC003
from __future__ import annotations

from datetime import date
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from pto_planner.schemas.vacation import VacationRequest, coerce_hours
from pto_planner.services.dates import parse_ymd, serialize_ymd


def _coerce_ymd(value: Any) -> Any:
    """Accept date objects as-is; strings must be canonical YYYY-MM-DD."""
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_ymd(value)
    msg = f"Expected a YYYY-MM-DD date string, got {type(value).__name__}"
    raise ValueError(msg)


# Civil date carried on the wire as "YYYY-MM-DD".
YMDDate = Annotated[date, BeforeValidator(_coerce_ymd), PlainSerializer(serialize_ymd, return_type=str)]


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# Snapshot wire format
# ---------------------------------------------------------------------------


class SnapshotVacation(_WireModel):
    """A vacation as stored in an exported snapshot."""

    id: str | int
    start_date: YMDDate
    end_date: YMDDate | None = None
    standard_hours: float = 0.0
    flex_hours: float = 0.0
    name: str | None = None

    @field_validator("standard_hours", "flex_hours", mode="before")
    @classmethod
    def _coerce_hours(cls, value: Any) -> float:
        return coerce_hours(value)

    def to_request(self) -> VacationRequest:
        return VacationRequest(
            id=self.id,
            start_date=self.start_date,
            end_date=self.end_date or self.start_date,
            standard_hours=self.standard_hours,
            flex_hours=self.flex_hours,
            name=self.name,
        )

    @classmethod
    def from_request(cls, vacation: VacationRequest) -> SnapshotVacation:
        return cls(
            id=vacation.id,
            start_date=vacation.start_date,
            end_date=vacation.end_date,
            standard_hours=vacation.standard_hours,
            flex_hours=vacation.flex_hours,
            name=vacation.name or None,
        )


class Snapshot(_WireModel):
    """Exported balances and vacations, valid as of export_date."""

    export_date: YMDDate
    current_standard_pto: float = 0.0
    current_flex_pto: float = 0.0
    vacations: list[SnapshotVacation] = []

    @field_validator("current_standard_pto", "current_flex_pto", mode="before")
    @classmethod
    def _coerce_balance(cls, value: Any) -> float:
        return coerce_hours(value)

    @field_validator("vacations", mode="before")
    @classmethod
    def _default_vacations(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape (camelCase keys, string dates)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# API request / response schemas
# ---------------------------------------------------------------------------


class ExportPayload(BaseModel):
    """Request body for exporting current balances and planned vacations."""

    export_date: date
    current_standard_pto: float = 0.0
    current_flex_pto: float = 0.0
    vacations: list[VacationRequest] = []


class ReconcileResponse(BaseModel):
    """Balances brought forward to today plus the vacations still ahead."""

    current_standard: float
    current_flex: float
    future_vacations: list[VacationRequest]
    accruals_applied: int = Field(description="Monthly accruals replayed since the export")
    vacations_applied: int = Field(description="Vacations deducted since the export")
