# bombo/api/schemas.py
from typing import List
from pydantic import BaseModel

# -------- Sorteo --------
class Winner(BaseModel):
    position: int  # 1-based, selection order only
    name: str


class DrawResult(BaseModel):
    source: str = ""
    pool_size: int
    requested: int
    seed: int  # replaying with this seed reproduces the same winners
    winners: List[Winner]
