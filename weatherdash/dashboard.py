"""Weather dashboard: FastAPI backend exposing dashboard state and controls."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel

from weatherdash.config.loader import default_config, load_config
from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import DashboardBusy, SearchError
from weatherdash.reporting.formatters import card_dict, unit_toggle_label
from weatherdash.state.dashboard_state import DashboardState, build_state

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("ops/configs/dashboard.yaml")
DASHBOARD_HTML = Path(__file__).parent / "static" / "dashboard.html"


class SearchRequest(BaseModel):
    city: str


def render_state(state: DashboardState) -> dict:
    view = state.snapshot()
    return {
        "records": [card_dict(r, view.use_celsius) for r in view.records],
        "loading": view.loading,
        "refreshing": view.refreshing,
        "error": view.error,
        "use_celsius": view.use_celsius,
        "unit_toggle_label": unit_toggle_label(view.use_celsius),
    }


def create_app(
    config: DashboardConfig | None = None, state: DashboardState | None = None
) -> FastAPI:
    if config is None:
        config = load_config(CONFIG_PATH) if CONFIG_PATH.exists() else default_config()
    if state is None:
        state = build_state(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await state.initialize(config.default_cities)
        logger.info("Dashboard ready with %d cities", len(state.records))
        yield

    app = FastAPI(title="Weather Dashboard", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.dashboard = state

    # ── Data endpoints ──────────────────────────────────────────

    @app.get("/api/state")
    def get_state():
        """Ordered cards plus loading/refreshing/error/unit flags."""
        return render_state(state)

    # ── Control endpoints ───────────────────────────────────────

    @app.post("/api/search")
    async def search(req: SearchRequest):
        try:
            await state.search(req.city)
        except SearchError as e:
            raise HTTPException(404, e.message)
        except DashboardBusy as e:
            raise HTTPException(409, str(e))
        return render_state(state)

    @app.post("/api/refresh/{record_id}")
    async def refresh(record_id: int):
        try:
            await state.refresh(record_id)
        except DashboardBusy as e:
            raise HTTPException(409, str(e))
        return render_state(state)

    @app.post("/api/unit/toggle")
    def toggle_unit():
        state.toggle_unit()
        return render_state(state)

    # ── Serve dashboard ─────────────────────────────────────────

    @app.get("/")
    def serve_dashboard():
        if DASHBOARD_HTML.exists():
            return FileResponse(DASHBOARD_HTML, media_type="text/html")
        return HTMLResponse("<h1>Dashboard not found</h1>", status_code=404)

    return app


if __name__ == "__main__":
    import uvicorn

    cfg = load_config(CONFIG_PATH) if CONFIG_PATH.exists() else default_config()
    uvicorn.run(create_app(cfg), host=cfg.server.host, port=cfg.server.port)
