import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from gpdesk.config import Settings, get_settings
from gpdesk.pipeline import MessagePipeline
from gpdesk.schemas import InboundMessage
from gpdesk.transport import dispatch_message


logger = logging.getLogger(__name__)


class MessageRequest(BaseModel):
    sender: str = Field(..., description="Opaque sender address")
    body: str = Field(..., description="Raw message text")


class MessageResponse(BaseModel):
    sender: str
    outcome: str
    reply: str | None = Field(None, description="Reply text, or null when no reply is sent")


class _CollectingSink:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send(self, recipient: str, text: str) -> None:
        self.sent.append((recipient, text))


def create_app(settings: Settings | None = None, pipeline: MessagePipeline | None = None) -> FastAPI:
    settings = settings or get_settings()
    pipeline = pipeline or MessagePipeline.from_settings(settings)
    app = FastAPI(title=settings.app_name)

    @app.get("/", response_class=PlainTextResponse)
    def liveness() -> str:
        return f"{settings.app_name} bot is running!"

    @app.post("/messages", response_model=MessageResponse)
    def receive_message(request: MessageRequest) -> MessageResponse:
        sink = _CollectingSink()
        result = dispatch_message(pipeline, sink, InboundMessage(sender=request.sender, body=request.body))
        reply = sink.sent[0][1] if sink.sent else None
        return MessageResponse(sender=request.sender, outcome=result.outcome.kind, reply=reply)

    return app
