from fastapi import APIRouter, HTTPException

from ..dependencies import EngineDep
from ..schemas import PlayerPublic

router = APIRouter()


@router.get("/player/{player_id}", response_model=PlayerPublic)
async def get_player(player_id: str, engine: EngineDep):
    player = engine.players.get(player_id)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")
    return PlayerPublic(index=player.id, name=player.name, wins=player.wins)
