from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ..exceptions import http_problem
from ..schemas import EventIn, GameOut, GameSummaryOut, RollIn, ScoreOut
from ..services.games import GameRegistry, get_game_registry

router = APIRouter(prefix="/bowling/games", tags=["bowling"])


# POST /api/v0/bowling/games
@router.post("", response_model=GameOut, status_code=201)
async def create_game(
    registry: GameRegistry = Depends(get_game_registry),
) -> GameOut:
    game_id = await registry.create()
    return GameOut(id=game_id, rolls=[])


@router.get("/{game_id}", response_model=GameSummaryOut)
async def get_game(
    game_id: str, registry: GameRegistry = Depends(get_game_registry)
) -> GameSummaryOut:
    summary = await registry.summary(game_id)
    return GameSummaryOut(id=game_id, **summary)


@router.post("/{game_id}/rolls", response_model=GameOut)
async def record_roll(
    game_id: str,
    body: RollIn,
    registry: GameRegistry = Depends(get_game_registry),
) -> GameOut:
    rolls = await registry.record(game_id, body.pins)
    return GameOut(id=game_id, rolls=rolls)


@router.post("/{game_id}/events", response_model=GameSummaryOut)
async def append_event(
    game_id: str,
    ev: EventIn,
    registry: GameRegistry = Depends(get_game_registry),
) -> GameSummaryOut:
    try:
        summary = await registry.apply_event(game_id, ev.model_dump())
    except ValueError as exc:
        raise http_problem(
            status_code=400,
            detail=str(exc),
            code="bowling_event_invalid",
        )
    return GameSummaryOut(id=game_id, **summary)


@router.get("/{game_id}/score", response_model=ScoreOut)
async def get_score(
    game_id: str, registry: GameRegistry = Depends(get_game_registry)
) -> ScoreOut:
    total = await registry.score(game_id)
    return ScoreOut(id=game_id, total=total)


@router.delete("/{game_id}", status_code=204)
async def delete_game(
    game_id: str, registry: GameRegistry = Depends(get_game_registry)
) -> Response:
    await registry.delete(game_id)
    return Response(status_code=204)
