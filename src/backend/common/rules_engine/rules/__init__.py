from .retailer_alphanumeric import RETAILER_ALPHANUMERIC
from .total_round_dollar import TOTAL_ROUND_DOLLAR
from .total_quarter_multiple import TOTAL_QUARTER_MULTIPLE
from .item_pairs import ITEM_PAIRS
from .item_description_length import ITEM_DESCRIPTION_LENGTH
from .purchase_day_odd import PURCHASE_DAY_ODD
from .purchase_time_afternoon import PURCHASE_TIME_AFTERNOON

__all__ = [
    "RETAILER_ALPHANUMERIC",
    "TOTAL_ROUND_DOLLAR",
    "TOTAL_QUARTER_MULTIPLE",
    "ITEM_PAIRS",
    "ITEM_DESCRIPTION_LENGTH",
    "PURCHASE_DAY_ODD",
    "PURCHASE_TIME_AFTERNOON",
]
