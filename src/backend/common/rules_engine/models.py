from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str


class Receipt(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "retailer": "Target",
                "purchaseDate": "2022-01-01",
                "purchaseTime": "13:01",
                "items": [{"shortDescription": "Mountain Dew 12PK", "price": "6.49"}],
                "total": "6.49",
            }
        },
    )

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: List[Item]
    total: str


class RuleResultDetail(BaseModel):
    key: str
    message: str
    values: Dict[str, Any] = Field(default_factory=dict)


class RuleResult(BaseModel):
    rule_id: str
    rule_title: str
    points: int = 0
    summary: str = ""

    details: List[RuleResultDetail] = Field(default_factory=list)


class ScoreReport(BaseModel):
    points: int = 0
    results: List[RuleResult] = Field(default_factory=list)

    def points_by_rule(self) -> Dict[str, int]:
        return {res.rule_id: res.points for res in self.results}
