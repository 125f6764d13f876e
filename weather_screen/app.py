import logging
import sys
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from .errors import ValidationError
from .presenter import present
from .screen import ScreenSession

logger = logging.getLogger(__name__)


app = FastAPI(title="Weather Screen")
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


# One screen, one session
SESSION = ScreenSession()


def get_session() -> ScreenSession:
    """Single-screen demo: every client shares the same screen state."""
    return SESSION


class CityQuery(BaseModel):
    city: Optional[str] = None


def _lookup_response(session: ScreenSession):
    if session.state.error:
        return JSONResponse({"error": session.state.error}, status_code=502)
    return present(session.state)


# ---- HTML screen ----

@app.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    city: Optional[str] = None,
    refresh: bool = False,
    session: ScreenSession = Depends(get_session),
):
    if city is not None:
        await session.search(city)
    elif refresh:
        await session.refresh()
    else:
        await session.ensure_started()
    session.close_day()
    return templates.TemplateResponse(request, "screen.html", {"screen": present(session.state)})


@app.get("/day/{index}", response_class=HTMLResponse)
async def day(request: Request, index: int, session: ScreenSession = Depends(get_session)):
    await session.ensure_started()
    session.select_day(index)
    return templates.TemplateResponse(request, "screen.html", {"screen": present(session.state)})


# ---- JSON API ----

@app.post("/api/lookup")
async def api_lookup(body: CityQuery, session: ScreenSession = Depends(get_session)):
    try:
        city = (body.city or "").strip()
        if not city:
            raise ValidationError("City name is required.")
        await session.search(city)
        return _lookup_response(session)
    except ValidationError as ve:
        return JSONResponse({"error": str(ve)}, status_code=400)


@app.post("/api/refresh")
async def api_refresh(session: ScreenSession = Depends(get_session)):
    await session.refresh()
    return _lookup_response(session)


@app.get("/api/state")
async def api_state(session: ScreenSession = Depends(get_session)):
    return present(session.state)


@app.post("/api/days/{index}")
async def api_select_day(index: int, session: ScreenSession = Depends(get_session)):
    state = session.select_day(index)
    if state.selected_day != index:
        return JSONResponse({"error": "No forecast for that day."}, status_code=404)
    return present(state)


@app.delete("/api/days")
async def api_close_day(session: ScreenSession = Depends(get_session)):
    return present(session.close_day())


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


def main():
    """Main entry point."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    port = 8080
    if len(sys.argv) > 1:
        try:
            port = int(sys.argv[1])
        except ValueError:
            logger.error(f"Invalid port: {sys.argv[1]}")
            sys.exit(1)

    logger.info(f"Starting Weather Screen on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="info")


if __name__ == "__main__":
    main()
