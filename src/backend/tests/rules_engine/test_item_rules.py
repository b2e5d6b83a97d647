from common.rules_engine.rules.item_description_length import ITEM_DESCRIPTION_LENGTH
from common.rules_engine.rules.item_pairs import ITEM_PAIRS


def test_item_pairs_four_and_five_items(make_ctx, make_items):
    four = make_items(*[("ab", "1.00")] * 4)
    five = make_items(*[("ab", "1.00")] * 5)
    assert ITEM_PAIRS().evaluate(make_ctx(items=four)).points == 10
    assert ITEM_PAIRS().evaluate(make_ctx(items=five)).points == 10


def test_single_item_has_no_pair(make_ctx):
    assert ITEM_PAIRS().evaluate(make_ctx()).points == 0


def test_description_multiple_of_three_scores_ceiling_of_fifth(make_ctx, make_items):
    items = make_items(("Emils Cheese Pizza", "12.25"))
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(items=items))
    assert res.points == 3
    assert res.details[0].values["length"] == 18


def test_description_is_trimmed_before_measuring(make_ctx, make_items):
    items = make_items(("   Klarbrunn 12-PK 12 FL OZ  ", "12.00"))
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(items=items))
    assert res.points == 3
    assert res.details[0].values["description"] == "Klarbrunn 12-PK 12 FL OZ"


def test_description_not_multiple_of_three_scores_nothing(make_ctx, make_items):
    items = make_items(("Mountain Dew 12PK", "6.49"), ("Knorr Creamy Chicken", "1.26"))
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(items=items))
    assert res.points == 0
    assert res.details == []


def test_ceiling_is_exact(make_ctx, make_items):
    # 10.00 * 0.2 is exactly 2, not 3; 0.05 * 0.2 rounds up to 1; 0.00 stays 0.
    items = make_items(("abc", "10.00"), ("def", "0.05"), ("ghi", "0.00"))
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(items=items))
    assert [d.values["points"] for d in res.details] == [2, 1, 0]
    assert res.points == 3


def test_blank_description_scores_by_default(make_ctx, make_items):
    items = make_items(("   ", "5.00"))
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(items=items))
    assert res.points == 1


def test_blank_description_can_be_excluded(make_ctx, make_items):
    items = make_items(("   ", "5.00"), ("abc", "5.00"))
    rules = {"ITEM-DESCRIPTION-LENGTH": {"score_empty_description": False}}
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(items=items, client_rules=rules))
    assert res.points == 1
    assert [d.key for d in res.details] == ["items.1"]


def test_price_multiplier_configurable(make_ctx, make_items):
    items = make_items(("abc", "10.00"))
    rules = {"ITEM-DESCRIPTION-LENGTH": {"price_multiplier": "0.25"}}
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(items=items, client_rules=rules))
    assert res.points == 3
