from fastapi import APIRouter

from ..dependencies import EngineDep
from ..schemas import RoomSummary, WinnerEntry

router = APIRouter()


@router.get("/rooms", response_model=list[RoomSummary])
async def get_rooms(engine: EngineDep):
    return engine.rooms.open_rooms()


@router.get("/winners", response_model=list[WinnerEntry])
async def get_winners(engine: EngineDep):
    return engine.leaderboard.snapshot()
