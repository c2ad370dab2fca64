"""Request/response schemas for the deduction-suggestions API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from taxwise.application.dtos.suggestion import (
    DeductionSuggestions,
    ExpenseData,
    FinancialData,
    IncomeData,
    MonetaryAmount,
)
from taxwise.domain.enums import Currency


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MonetaryAmountIn(_CamelModel):
    value: float = Field(default=0.0, ge=0)
    currency: Currency = Currency.USD

    def to_dto(self) -> MonetaryAmount:
        return MonetaryAmount(value=self.value, currency=self.currency)


class IncomeIn(_CamelModel):
    job: MonetaryAmountIn = Field(default_factory=MonetaryAmountIn)
    investments: MonetaryAmountIn = Field(default_factory=MonetaryAmountIn)
    property_income: MonetaryAmountIn = Field(default_factory=MonetaryAmountIn)
    credits: MonetaryAmountIn = Field(default_factory=MonetaryAmountIn)
    other_income_details: str = ""


class ExpensesIn(_CamelModel):
    medical: MonetaryAmountIn = Field(default_factory=MonetaryAmountIn)
    educational: MonetaryAmountIn = Field(default_factory=MonetaryAmountIn)
    social: MonetaryAmountIn = Field(default_factory=MonetaryAmountIn)
    property: MonetaryAmountIn = Field(default_factory=MonetaryAmountIn)
    other_expenses_details: str = ""


class FinancialDataIn(_CamelModel):
    income: IncomeIn = Field(default_factory=IncomeIn)
    expenses: ExpensesIn = Field(default_factory=ExpensesIn)

    def to_dto(self) -> FinancialData:
        i, e = self.income, self.expenses
        return FinancialData(
            income=IncomeData(
                job=i.job.to_dto(),
                investments=i.investments.to_dto(),
                property_income=i.property_income.to_dto(),
                credits=i.credits.to_dto(),
                other_income_details=i.other_income_details,
            ),
            expenses=ExpenseData(
                medical=e.medical.to_dto(),
                educational=e.educational.to_dto(),
                social=e.social.to_dto(),
                property=e.property.to_dto(),
                other_expenses_details=e.other_expenses_details,
            ),
        )


class SuggestionRequest(_CamelModel):
    """Body of POST /suggestions."""

    user_id: str = Field(..., min_length=1)
    user_name: str = ""
    financial_data: FinancialDataIn
    documents_data_urls: list[str] = Field(default_factory=list)


class SuggestionResponse(_CamelModel):
    suggested_deductions: list[str]
    summary: str

    @classmethod
    def from_dto(cls, dto: DeductionSuggestions) -> "SuggestionResponse":
        return cls(suggested_deductions=dto.suggested_deductions, summary=dto.summary)


class SuggestionErrorResponse(BaseModel):
    error: str
