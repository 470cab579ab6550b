"""Fee schedule — percentages and fixed components of a booking charge."""

from pydantic import BaseModel, ConfigDict, Field


class FeeSchedule(BaseModel):
    """Generic fee schedule used by the price breakdown calculator.

    Percentages are fractions (0.12 = 12%).  Fixed components are in major
    currency units (dollars, not cents).
    """

    model_config = ConfigDict(frozen=True)

    platform_fee_pct: float = Field(
        default=0.12, ge=0, le=1.0,
        description="Platform cut of the base amount, withheld from the host.",
    )
    driver_service_fee_pct: float = Field(
        default=0.08, ge=0, le=1.0,
        description="Service fee charged to the driver as a share of the base amount.",
    )
    driver_service_fee_fixed: float = Field(
        default=0.50, ge=0,
        description="Flat service fee added on top of the percentage component.",
    )
    processing_pct: float = Field(
        default=0.029, ge=0, le=1.0,
        description="Card processing percentage, applied to the driver-facing total.",
    )
    processing_fixed: float = Field(
        default=0.30, ge=0,
        description="Card processing flat fee per charge.",
    )
    sales_tax_pct: float = Field(
        default=0.0, ge=0, le=1.0,
        description="Sales tax on base + service fee. Processing and platform fees are untaxed.",
    )
    currency_minor_unit: int = Field(
        default=2, ge=0, le=6,
        description="Decimal places every amount is rounded to (2 = cents).",
    )
    processing_paid_by_host: bool = Field(
        default=False,
        description="True: processing is deducted from the host payout. "
                    "False: the platform absorbs it out of its own fees.",
    )


DEFAULTS = FeeSchedule()
