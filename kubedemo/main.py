from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .config import Settings
from .schemas import BurnResult, Greeting
from .utils import burn_cpu, burn_duration, now_iso


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="kubedemo", version=settings.version)

    # === Identity ===

    @app.get("/", response_model=Greeting)
    def root() -> Greeting:
        return Greeting(message=settings.message, version=settings.version, timestamp=now_iso())

    # === Probes ===

    @app.get("/health", response_class=PlainTextResponse)
    def health() -> str:
        return "OK"

    # === Load generation ===

    # Sync on purpose: the burn occupies one threadpool worker.
    @app.get("/cpu", response_model=BurnResult)
    def cpu(ms: Optional[str] = None) -> BurnResult:
        duration = burn_duration(ms)
        burn_cpu(duration)
        return BurnResult(burnedMs=duration, timestamp=now_iso())

    return app
