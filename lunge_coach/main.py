# lunge_coach/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lunge_coach.config import setup_logging
from lunge_coach.landmarks import InvalidFrameShape
from lunge_coach.models import FrameResponse, LandmarkFrameIn, SessionResponse
from lunge_coach.rep_logic import LungeTracker

logger = logging.getLogger(__name__)


def create_app(tracker: Optional[LungeTracker] = None) -> FastAPI:
    app = FastAPI(title="Lunge Coach Backend")
    app.state.tracker = tracker or LungeTracker()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidFrameShape)
    async def handle_invalid_frame(request: Request, exc: InvalidFrameShape):
        logger.warning("rejected frame on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"error": "invalid_frame_shape", "detail": str(exc)},
        )

    @app.get("/")
    def health_check():
        return {"status": "ok"}

    @app.post("/frame", response_model=Optional[FrameResponse])
    def post_frame(body: LandmarkFrameIn):
        tracker: LungeTracker = app.state.tracker
        frame = body.to_frame()
        if frame is None:
            # nobody detected: keep showing the last values
            result = tracker.last_result
        else:
            result = tracker.update(frame)
        if result is None:
            return None
        return FrameResponse(**result.as_dict())

    @app.post("/reset", response_model=SessionResponse)
    def post_reset():
        session = app.state.tracker.reset()
        return SessionResponse(**session.as_dict())

    @app.get("/session", response_model=SessionResponse)
    def get_session():
        session = app.state.tracker.snapshot()
        return SessionResponse(**session.as_dict())

    return app


app = create_app()


def run(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn

    setup_logging()
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
