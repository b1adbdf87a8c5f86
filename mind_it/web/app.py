from contextlib import asynccontextmanager
from typing import Callable, Dict, Optional
import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from mind_it.main import MindItApp
from mind_it.models.activity import ActivityKind, list_activities
from mind_it.models.chat import ChatMode
from mind_it.services.errors import NavigationError, SessionError
from mind_it.services.navigation import ASSESSMENT_OPTIONS, ASSESSMENT_QUESTIONS

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

class NavigateRequest(BaseModel):
    action: str
    form: Dict[str, str] = Field(default_factory=dict)

class AnswerRequest(BaseModel):
    question_id: int
    option: str

class StartSessionRequest(BaseModel):
    activity: ActivityKind

class ChatRequest(BaseModel):
    text: str
    mode: Optional[ChatMode] = None

class ModeRequest(BaseModel):
    mode: ChatMode

def create_app(state_factory: Callable[[], MindItApp] = MindItApp) -> FastAPI:
    """Build the web app; the MindItApp lives for the lifetime of the server"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.mind = state_factory()
        try:
            yield
        finally:
            app.state.mind.shutdown()

    app = FastAPI(title="Mind It", lifespan=lifespan)

    def mind(request: Request) -> MindItApp:
        return request.app.state.mind

    @app.get("/")
    async def index(request: Request):
        """Single page for the current screen"""
        try:
            return templates.TemplateResponse(
                request,
                "index.html",
                {
                    "state": mind(request).snapshot(),
                    "chat": mind(request).chat.to_dict(),
                    "activities": list_activities(),
                    "questions": ASSESSMENT_QUESTIONS,
                    "options": ASSESSMENT_OPTIONS
                }
            )
        except Exception as e:
            logger.error(f"Page render error: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    @app.get("/api/state")
    async def get_state(request: Request):
        return mind(request).snapshot()

    @app.get("/api/activities")
    async def get_activities():
        return list_activities()

    @app.get("/api/assessment")
    async def get_assessment():
        return {"questions": ASSESSMENT_QUESTIONS, "options": ASSESSMENT_OPTIONS}

    @app.post("/api/assessment/answer")
    async def answer_question(payload: AnswerRequest, request: Request):
        mind(request).navigation.answer(payload.question_id, payload.option)
        return mind(request).snapshot()

    @app.post("/api/navigate")
    async def navigate(payload: NavigateRequest, request: Request):
        mind(request).navigate(payload.action, payload.form)
        return mind(request).snapshot()

    @app.post("/api/sessions/start")
    async def start_session(payload: StartSessionRequest, request: Request):
        mind(request).start_session(payload.activity)
        return mind(request).snapshot()

    @app.post("/api/sessions/stop")
    async def stop_session(request: Request):
        record = mind(request).stop_session()
        return {
            "record": record.model_dump(mode="json") if record else None,
            "state": mind(request).snapshot()
        }

    @app.get("/api/report")
    async def get_report(request: Request):
        return mind(request).report()

    @app.get("/api/chat")
    async def get_chat(request: Request):
        return mind(request).chat.to_dict()

    @app.post("/api/chat")
    async def send_chat(payload: ChatRequest, request: Request):
        chat = mind(request).chat
        if payload.mode is not None:
            chat.set_mode(payload.mode)
        reply = await chat.send(payload.text)
        if reply is None:
            raise HTTPException(status_code=409, detail="Message is empty or a reply is still pending")
        return {"reply": reply.model_dump(), "chat": chat.to_dict()}

    @app.delete("/api/chat")
    async def clear_chat(request: Request):
        mind(request).chat.clear()
        return mind(request).chat.to_dict()

    @app.put("/api/chat/mode")
    async def set_chat_mode(payload: ModeRequest, request: Request):
        mind(request).chat.set_mode(payload.mode)
        return mind(request).chat.to_dict()

    @app.post("/api/chat/open")
    async def open_chat(request: Request):
        if not mind(request).navigation.chat_available:
            raise HTTPException(status_code=409, detail="Chat is not available on this screen")
        mind(request).chat.open()
        return mind(request).chat.to_dict()

    @app.post("/api/chat/close")
    async def close_chat(request: Request):
        mind(request).chat.close()
        return mind(request).chat.to_dict()

    # Add error handlers
    @app.exception_handler(NavigationError)
    async def navigation_error_handler(request: Request, exc: NavigationError):
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)}
        )

    @app.exception_handler(SessionError)
    async def session_error_handler(request: Request, exc: SessionError):
        return JSONResponse(
            status_code=409,
            content={"detail": str(exc)}
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=404,
            content={"detail": "Not found"}
        )

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)}
        )

    return app

app = create_app()
