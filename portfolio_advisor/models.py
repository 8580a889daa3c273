"""
Portfolio payload shapes.

A portfolio payload is a JSON object whose keys are asset categories, plus an
optional ``profileDetails`` entry. Each category value is classified into one
of three variants so that rendering can dispatch on an explicit type instead
of probing the raw JSON.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

PROFILE_KEY = "profileDetails"


@dataclass(frozen=True)
class Holding:
    name: Any = None
    amount: Any = None
    invest_date: Any = None
    maturity_date: Any = None
    variables: Any = None

    @classmethod
    def from_json(cls, raw: Any) -> "Holding":
        # Non-object entries render with every placeholder.
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            name=raw.get("name"),
            amount=raw.get("amount"),
            invest_date=raw.get("investDate"),
            maturity_date=raw.get("maturityDate"),
            variables=raw.get("variables"),
        )


@dataclass(frozen=True)
class HoldingsCategory:
    name: str
    holdings: tuple[Holding, ...]


@dataclass(frozen=True)
class AggregateCategory:
    name: str
    total_amount: Any


@dataclass(frozen=True)
class EmptyCategory:
    name: str


AssetCategory = Union[HoldingsCategory, AggregateCategory, EmptyCategory]


@dataclass(frozen=True)
class Profile:
    dob: Any = None
    gender: Any = None
    dependents: Any = None
    occupation: Any = None
    annual_income: Any = None
    tax_bracket: Any = None
    investment_corpus: Any = None

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "Profile":
        return cls(
            dob=raw.get("dob"),
            gender=raw.get("gender"),
            dependents=raw.get("noOfDependents"),
            occupation=raw.get("occupation"),
            annual_income=raw.get("annualIncome"),
            tax_bracket=raw.get("taxBracket"),
            investment_corpus=raw.get("exactAnnualInvestmentIncomeCorpus"),
        )


def is_truthy(value: Any) -> bool:
    """JSON truthiness: empty arrays and objects still count as present."""
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def classify_category(name: str, value: Any) -> AssetCategory:
    """Map a raw category value onto its variant."""
    if isinstance(value, list) and value:
        return HoldingsCategory(
            name=name, holdings=tuple(Holding.from_json(item) for item in value)
        )
    if isinstance(value, Mapping) and is_truthy(value.get("totalAmount")):
        return AggregateCategory(name=name, total_amount=value["totalAmount"])
    return EmptyCategory(name=name)


def split_portfolio(
    portfolio: Mapping[str, Any],
) -> tuple[Profile | None, list[AssetCategory]]:
    """Separate the profile from the asset categories, keeping input order."""
    raw_profile = portfolio.get(PROFILE_KEY)
    if isinstance(raw_profile, Mapping):
        profile = Profile.from_json(raw_profile)
    elif is_truthy(raw_profile):
        # A present but non-object profile still renders, with every field missing.
        profile = Profile()
    else:
        profile = None
    categories = [
        classify_category(name, value)
        for name, value in portfolio.items()
        if name != PROFILE_KEY
    ]
    return profile, categories
