import pytest

from portfolio_advisor.models import (
    AggregateCategory,
    EmptyCategory,
    Holding,
    HoldingsCategory,
    Profile,
    classify_category,
    split_portfolio,
)


def test_non_empty_list_is_holdings():
    category = classify_category(
        "mutualFunds", [{"name": "HDFC Flexi Cap", "amount": 3000}]
    )
    assert category == HoldingsCategory(
        name="mutualFunds",
        holdings=(Holding(name="HDFC Flexi Cap", amount=3000),),
    )


def test_object_with_total_is_aggregate():
    assert classify_category("digitalGold", {"totalAmount": 21750}) == (
        AggregateCategory(name="digitalGold", total_amount=21750)
    )


@pytest.mark.parametrize(
    "value",
    [[], None, {}, {"totalAmount": 0}, {"totalAmount": None}, "text", 42],
)
def test_other_shapes_are_empty(value):
    assert classify_category("bonds", value) == EmptyCategory(name="bonds")


def test_holding_reads_camel_case_keys():
    holding = Holding.from_json(
        {
            "name": "Sukanya",
            "amount": 6985,
            "investDate": "2025-05-06",
            "maturityDate": "2026-02-18",
            "variables": {"rate": 8.2},
        }
    )
    assert holding.invest_date == "2025-05-06"
    assert holding.maturity_date == "2026-02-18"
    assert holding.variables == {"rate": 8.2}


def test_split_portfolio_separates_profile():
    profile, categories = split_portfolio(
        {
            "etfs": [],
            "profileDetails": {"occupation": "Teacher", "noOfDependents": 1},
            "fixedDeposits": {"totalAmount": 100},
        }
    )
    assert profile == Profile(occupation="Teacher", dependents=1)
    assert [c.name for c in categories] == ["etfs", "fixedDeposits"]


def test_split_portfolio_without_profile():
    profile, categories = split_portfolio({"etfs": []})
    assert profile is None
    assert categories == [EmptyCategory(name="etfs")]


def test_truthy_non_object_profile_is_empty_profile():
    profile, categories = split_portfolio({"profileDetails": "yes", "etfs": []})
    assert profile == Profile()
    assert categories == [EmptyCategory(name="etfs")]
