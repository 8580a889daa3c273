import json
import logging
from typing import Any, Mapping

from .models import (
    AggregateCategory,
    AssetCategory,
    EmptyCategory,
    PROFILE_KEY,
    Holding,
    HoldingsCategory,
    Profile,
    is_truthy,
    split_portfolio,
)
from .prompts import ADVISORY_TEMPLATE

logger = logging.getLogger(__name__)

CURRENCY = "₹"
PLACEHOLDER = "N/A"


def _integral_floats_as_ints(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [_integral_floats_as_ints(item) for item in value]
    if isinstance(value, dict):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    return value


def _to_json(value: Any) -> str:
    return json.dumps(
        _integral_floats_as_ints(value), separators=(",", ":"), ensure_ascii=False
    )


def _display(value: Any) -> str:
    """Render a JSON value the way it reads in JSON text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return _to_json(value)
    return str(value)


def _or(value: Any, default: Any) -> str:
    return _display(value if is_truthy(value) else default)


def _field(value: Any) -> str:
    return PLACEHOLDER if value is None else _display(value)


def render_profile(profile: Profile | None) -> str:
    if profile is None:
        return ""
    return (
        "\nUser Profile:\n"
        f"- Date of Birth: {_field(profile.dob)}\n"
        f"- Gender: {_field(profile.gender)}\n"
        f"- Dependents: {_field(profile.dependents)}\n"
        f"- Occupation: {_field(profile.occupation)}\n"
        f"- Annual Income: {CURRENCY}{_field(profile.annual_income)}\n"
        f"- Tax Bracket: {_field(profile.tax_bracket)}\n"
        f"- Investment Corpus: {CURRENCY}{_field(profile.investment_corpus)}\n"
    )


def render_holding(index: int, holding: Holding) -> str:
    variables = holding.variables if is_truthy(holding.variables) else {}
    return (
        f"  {index}. Name: {_or(holding.name, PLACEHOLDER)}, "
        f"Amount: {CURRENCY}{_or(holding.amount, 0)}, "
        f"Invest Date: {_or(holding.invest_date, PLACEHOLDER)}, "
        f"Maturity: {_or(holding.maturity_date, PLACEHOLDER)}, "
        f"Variables: {_to_json(variables)}"
    )


def render_category(category: AssetCategory) -> str:
    header = category.name.upper()
    if isinstance(category, HoldingsCategory):
        lines = [
            render_holding(index, holding)
            for index, holding in enumerate(category.holdings, start=1)
        ]
        return f"\n{header}:\n" + "\n".join(lines)
    if isinstance(category, AggregateCategory):
        return f"\n{header}: {CURRENCY}{_display(category.total_amount)}"
    if isinstance(category, EmptyCategory):
        return f"\n{header}: None"
    raise TypeError(f"Unknown asset category: {category!r}")


def build_prompt(portfolio: Mapping[str, Any]) -> str:
    """
    Render a portfolio payload into the advisory prompt.

    The profile section (if any) comes first, followed by one block per asset
    category in the order the categories appear in the payload. Missing or
    malformed fields fall back to placeholders; this function never rejects
    input.
    """
    profile, categories = split_portfolio(portfolio)
    logger.debug(
        "assets %s",
        {name: value for name, value in portfolio.items() if name != PROFILE_KEY},
    )

    profile_section = render_profile(profile)
    portfolio_section = "\n".join(render_category(c) for c in categories)

    return f"{ADVISORY_TEMPLATE}\n{profile_section}\n\n{portfolio_section}\n  "
