from enum import Enum
from sqlalchemy.dialects.postgresql import ENUM

# Python enums for type hints and constants


class CyclePolicy(str, Enum):
    CALENDAR = "CALENDAR"
    MIDMONTH = "MIDMONTH"


class PaymentStatus(str, Enum):
    PAID = "PAID"
    PARTIAL = "PARTIAL"
    PENDING = "PENDING"
    FAILED = "FAILED"


class PaymentMethod(str, Enum):
    GPAY = "GPAY"
    PHONEPE = "PHONEPE"
    CASH = "CASH"
    BANK_TRANSFER = "BANK_TRANSFER"


# SQLAlchemy enum types for database
cycle_policy_enum = ENUM(
    *[x.value for x in CyclePolicy],
    name='cyclepolicy',
    create_type=False  # Important: let migrations handle type creation
)

payment_status_enum = ENUM(
    *[x.value for x in PaymentStatus],
    name='paymentstatus',
    create_type=False  # Important: let migrations handle type creation
)

payment_method_enum = ENUM(
    *[x.value for x in PaymentMethod],
    name='paymentmethod',
    create_type=False  # Important: let migrations handle type creation
)
