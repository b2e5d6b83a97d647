from __future__ import annotations

from fastapi import Request

from common.rules_engine import RulesRunner, ScoringConfig
from stores import PointsStore


def get_points_store(request: Request) -> PointsStore:
    return request.app.state.points_store


def get_scoring_config(request: Request) -> ScoringConfig:
    return request.app.state.scoring_config


def get_rules_runner(request: Request) -> RulesRunner:
    return request.app.state.rules_runner
