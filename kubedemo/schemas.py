from __future__ import annotations

from pydantic import BaseModel


class Greeting(BaseModel):
    message: str
    version: str
    timestamp: str


class BurnResult(BaseModel):
    ok: bool = True
    burnedMs: int
    timestamp: str
