from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from common.rules_engine import Receipt, RulesRunner, ScoringConfig
from stores import PointsStore

from api.deps import get_points_store, get_rules_runner, get_scoring_config


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


class ProcessResponse(BaseModel):
    id: str = Field(pattern=r"^\S+$", examples=["adb6b560-0eef-42bc-9d16-df48f30e89b2"])


class PointsResponse(BaseModel):
    points: int = Field(examples=[100])


class AllReceiptsResponse(BaseModel):
    receipts: dict[str, int]


@router.post(
    "/process",
    response_model=ProcessResponse,
    summary="Submits a receipt for processing",
    responses={400: {"description": "The receipt is invalid"}},
)
def process_receipt(
    receipt: Receipt,
    store: PointsStore = Depends(get_points_store),
    runner: RulesRunner = Depends(get_rules_runner),
    config: ScoringConfig = Depends(get_scoring_config),
):
    # InvalidReceiptError propagates to the app-level handler; nothing is stored for a rejected receipt.
    report = runner.run(receipt, config=config)
    receipt_id = str(uuid.uuid4())
    store.put(receipt_id, report.points)
    logger.info("Scored receipt %s from %r: %d points", receipt_id, receipt.retailer, report.points)
    return ProcessResponse(id=receipt_id)


@router.get(
    "/all",
    response_model=AllReceiptsResponse,
    summary="Returns the points and IDs for all receipts",
)
def list_receipts(store: PointsStore = Depends(get_points_store)):
    return AllReceiptsResponse(receipts=store.all())


@router.get(
    "/{receipt_id}/points",
    response_model=PointsResponse,
    summary="Returns the points awarded for the receipt",
    responses={404: {"description": "No receipt found for that ID."}},
)
def get_receipt_points(receipt_id: str, store: PointsStore = Depends(get_points_store)):
    points = store.get(receipt_id)
    if points is None:
        raise HTTPException(status_code=404, detail="No receipt found for that ID.")
    return PointsResponse(points=points)
