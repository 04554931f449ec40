from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BankVariant(str, Enum):
    GENERIC = "generic"
    CHASE = "chase"
    BANK_OF_AMERICA = "bankOfAmerica"
    WELLS_FARGO = "wellsFargo"
    CITIBANK = "citibank"


class TransactionType(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"
    UNKNOWN = "unknown"


class Category(str, Enum):
    BANKING_FEES = "Banking Fees"
    ATM_CASH = "ATM/Cash"
    INCOME = "Income"
    TRANSFERS = "Transfers"
    ONLINE_PAYMENT = "Online Payment"
    CHECK = "Check"
    DEBIT_CARD = "Debit Card"
    OTHER = "Other"


class SkipReason(str, Enum):
    NO_DATE = "no_date"
    NO_AMOUNT = "no_amount"
    INVALID_DATE = "invalid_date"
    INVALID_AMOUNT = "invalid_amount"
    DATE_AFTER_AMOUNT = "date_after_amount"
    EMPTY_DESCRIPTION = "empty_description"


class OutputModel(BaseModel):
    """Campos snake_case en Python, camelCase al serializar con by_alias=True."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Transaction(OutputModel):
    date: datetime.date
    description: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., description="Signed amount. Negative=outflow, Positive=inflow")
    balance: Optional[Decimal] = None
    type: TransactionType
    category: Category


class AccountInfo(OutputModel):
    account_number_masked: Optional[str] = None
    account_holder: Optional[str] = None
    opening_balance: Optional[Decimal] = None
    closing_balance: Optional[Decimal] = None


class StatementPeriod(OutputModel):
    # "from" es palabra reservada en Python; alias explicito
    start: datetime.date = Field(..., alias="from")
    end: datetime.date = Field(..., alias="to")


class ParseMetadata(OutputModel):
    page_count: int
    parsed_at: datetime.datetime


@dataclass(frozen=True)
class SkippedCandidate:
    line_number: int
    line: str
    reason: SkipReason


class StatementData(OutputModel):
    bank_variant: BankVariant
    account_info: AccountInfo = Field(default_factory=AccountInfo)
    transactions: List[Transaction] = Field(default_factory=list)
    total_transactions: int = 0
    statement_period: Optional[StatementPeriod] = None
    metadata: ParseMetadata
    # Diagnostico: lineas descartadas y el motivo. No se serializa.
    skipped: List[SkippedCandidate] = Field(default_factory=list, exclude=True)


class ParseResult(OutputModel):
    success: bool
    data: Optional[StatementData] = None
    error: Optional[str] = None

    @property
    def transactions(self) -> List[Transaction]:
        return self.data.transactions if self.data else []


@dataclass
class Candidate:
    """
    Transaccion tentativa, todavia sin pasar por el filtro final.
    Los montos vienen sin redondear.
    """
    line_number: int
    date: Optional[datetime.date]
    description: Optional[str]
    amount: Optional[Decimal]
    balance: Optional[Decimal] = None
    type: TransactionType = TransactionType.UNKNOWN
    category: Category = Category.OTHER


@dataclass
class Extraction:
    accepted: List[Candidate] = field(default_factory=list)
    skipped: List[SkippedCandidate] = field(default_factory=list)

    def extend(self, other: "Extraction") -> None:
        self.accepted.extend(other.accepted)
        self.skipped.extend(other.skipped)
