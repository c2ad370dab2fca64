"""DTOs for AI deduction suggestions."""

from dataclasses import dataclass, field

from taxwise.domain.enums import Currency


@dataclass(frozen=True)
class MonetaryAmount:
    value: float
    currency: Currency

    def format(self) -> str:
        return f"{self.value:g} {self.currency.value}"


@dataclass(frozen=True)
class IncomeData:
    job: MonetaryAmount
    investments: MonetaryAmount
    property_income: MonetaryAmount
    credits: MonetaryAmount
    other_income_details: str = ""


@dataclass(frozen=True)
class ExpenseData:
    medical: MonetaryAmount
    educational: MonetaryAmount
    social: MonetaryAmount
    property: MonetaryAmount
    other_expenses_details: str = ""


@dataclass(frozen=True)
class FinancialData:
    """Everything the user entered on the data-input form."""

    income: IncomeData
    expenses: ExpenseData


# Amount fields per section (the *_details free text is not a category).
INCOME_CATEGORY_COUNT = 4
EXPENSE_CATEGORY_COUNT = 4


@dataclass(frozen=True)
class DeductionSuggestions:
    """Validated model output."""

    suggested_deductions: list[str] = field(default_factory=list)
    summary: str = ""


@dataclass(frozen=True)
class SuggestionError:
    """Typed failure result; the route decides how to present it."""

    error: str
