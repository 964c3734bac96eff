from datetime import date
from enum import Enum
from typing import List
from pydantic import BaseModel, Field
from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.rent_cycles.schemas import Gap


class NextPeriodSource(str, Enum):
    GAP = "gap"
    NEXT_PERIOD = "next_period"
    JOINING_DATE = "joining_date"


class PaymentGapReport(BaseModel):
    tenant_id: int
    rent_cycle_type: CyclePolicy
    as_of: date = Field(description="Date the tenant history was reconciled up to")
    has_gaps: bool
    gaps: List[Gap] = []


class NextPaymentDates(BaseModel):
    tenant_id: int
    rent_cycle_type: CyclePolicy
    suggested_start_date: date
    suggested_end_date: date
    source: NextPeriodSource = Field(
        description="gap: earliest open gap, next_period: after the latest payment, "
                    "joining_date: first period of the stay")
