from typing import List, Optional
from datetime import date
from sqlmodel import Session
from src.api.common.utils.datetime import get_current_date
from src.api.rent_cycles.schemas import BillingPeriod
from src.api.rent_cycles.services.gap_detector import detect_gaps
from src.api.rent_cycles.services.gap_resolution import select_gap, skip_to_next
from src.api.tenants.models.tenant import Tenant
from src.api.tenants.schemas.payment_gaps import NextPaymentDates, NextPeriodSource, PaymentGapReport


class PaymentGapService:
    """
    Reconciles stored tenant payments against the rent cycle of their PG
    location. Every call recomputes from the database; nothing is cached, so a
    gap disappears as soon as a payment covering it is recorded.
    """

    def __init__(self, db: Session):
        self.db = db

    def _get_history(self, tenant: Tenant) -> List[BillingPeriod]:
        return [BillingPeriod.from_value(payment) for payment in tenant.payments]

    def _get_reconcile_date(self, tenant: Tenant, as_of: Optional[date]) -> date:
        as_of = as_of or get_current_date()
        if tenant.check_out_date and tenant.check_out_date < as_of:
            return tenant.check_out_date
        return as_of

    def get_payment_gaps(self, tenant_id: int, as_of: Optional[date] = None) -> Optional[PaymentGapReport]:
        """
        Missing rent periods for a tenant up to `as_of` (today by default,
        never past the check-out date). Returns None if the tenant does not exist.
        """
        tenant = self.db.get(Tenant, tenant_id)
        if not tenant:
            return None

        as_of = self._get_reconcile_date(tenant, as_of)
        gaps = detect_gaps(
            self._get_history(tenant), tenant.joining_date, as_of, tenant.rent_cycle_type)

        return PaymentGapReport(
            tenant_id=tenant.id,
            rent_cycle_type=tenant.rent_cycle_type,
            as_of=as_of,
            has_gaps=len(gaps) > 0,
            gaps=gaps,
        )

    def get_next_payment_dates(self, tenant_id: int, skip_gaps: bool = True,
                               as_of: Optional[date] = None) -> Optional[NextPaymentDates]:
        """
        Suggest the period for the next payment of a tenant.

        With skip_gaps the period after the latest payment is proposed (the
        first period of the stay if there are no payments). Without it the
        earliest open gap is proposed when there is one.
        """
        tenant = self.db.get(Tenant, tenant_id)
        if not tenant:
            return None

        policy = tenant.rent_cycle_type
        history = self._get_history(tenant)

        if not skip_gaps:
            report = self.get_payment_gaps(tenant_id, as_of)
            if report.has_gaps:
                period = select_gap(report.gaps[0])
                return self._build_next_dates(tenant, period, NextPeriodSource.GAP)

        period = skip_to_next(history, policy, tenant.joining_date)
        source = NextPeriodSource.NEXT_PERIOD if history else NextPeriodSource.JOINING_DATE
        return self._build_next_dates(tenant, period, source)

    def _build_next_dates(self, tenant: Tenant, period: BillingPeriod,
                          source: NextPeriodSource) -> NextPaymentDates:
        return NextPaymentDates(
            tenant_id=tenant.id,
            rent_cycle_type=tenant.rent_cycle_type,
            suggested_start_date=period.start,
            suggested_end_date=period.end,
            source=source,
        )
