# ============================================================
# API Docs Generator FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Inference client selection (Hugging Face, Ollama, OpenAI, Echo)
#   - Clarifying-question chat
#   - Documentation generation + Markdown download
# ============================================================

from contextlib import asynccontextmanager
from typing import List, Literal, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field, ValidationError

# --- Local imports ---
from docgen.settings import settings
from docgen.logging_utils import get_logger
from docgen.clarify import extend_transcript, opening_message
from docgen.generate import ChatMessage, DocumentationGenerator, GenerationResult, build_model_client
from docgen.generate.generator import RETRY_QUESTION

logger = get_logger("docgen.app")

DOWNLOAD_FILENAME = "api-documentation.md"


# ------------------------------------------------------------
# 🔧 Model client selection (at startup; a missing key fails here)
# ------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    model_client = build_model_client(settings)
    app.state.doc_generator = DocumentationGenerator(model_client=model_client)
    logger.info("Inference backend: %s (%s)", type(model_client).__name__, getattr(model_client, "model", None))
    yield
    app.state.doc_generator.close()


def get_doc_generator(request: Request) -> DocumentationGenerator:
    return request.app.state.doc_generator


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=settings.app_name, version="0.3", lifespan=lifespan)


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    role: Literal["assistant", "user"]
    content: str

    def to_message(self) -> ChatMessage:
        return ChatMessage(role=self.role, content=self.content)


class GenerateDocsRequest(BaseModel):
    openApiSpec: str = Field(..., min_length=1)
    meetingNotes: Optional[str] = ""
    chatContext: Optional[List[ChatTurn]] = None


class ErrorInfo(BaseModel):
    message: str
    type: str


class GenerateDocsResponse(BaseModel):
    documentation: str
    followUpQuestions: List[str]
    error: Optional[ErrorInfo] = None


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    history: List[ChatTurn] = Field(default_factory=list)


class ChatReply(BaseModel):
    message: ChatTurn
    history: List[ChatTurn]


class ChatStart(BaseModel):
    messages: List[ChatTurn]


def _turn(msg: ChatMessage) -> ChatTurn:
    return ChatTurn(role=msg.role, content=msg.content)


def _to_response(result: GenerationResult) -> GenerateDocsResponse:
    return GenerateDocsResponse(
        documentation=result.documentation,
        followUpQuestions=result.follow_up_questions,
        error=ErrorInfo(**result.error) if result.error else None,
    )


def _validation_failure(exc: ValidationError) -> GenerateDocsResponse:
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ()))
    message = f"{field}: {first.get('msg', 'invalid request')}" if field else str(exc)
    return GenerateDocsResponse(
        documentation="# Error\nFailed to generate documentation. Please try again.",
        followUpQuestions=[RETRY_QUESTION],
        error=ErrorInfo(message=message, type="ValidationError"),
    )


async def _run_generation(request: Request, generator: DocumentationGenerator) -> GenerateDocsResponse:
    # failures are reported in the body; the status stays 200
    try:
        body = await request.json()
    except ValueError:
        body = None
    try:
        req = GenerateDocsRequest.model_validate(body)
    except ValidationError as e:
        logger.warning("Rejected generate-docs request: %s", e.errors())
        return _validation_failure(e)

    logger.info(
        "Request body received: spec_length=%d has_notes=%s has_context=%s",
        len(req.openApiSpec), bool(req.meetingNotes), bool(req.chatContext),
    )
    chat_context = [t.to_message() for t in (req.chatContext or [])]
    result = await generator.generate_documentation(req.openApiSpec, req.meetingNotes or "", chat_context)
    logger.info(
        "Generation result: doc_length=%d questions=%d degraded=%s",
        len(result.documentation), len(result.follow_up_questions), result.error is not None,
    )
    return _to_response(result)


# ------------------------------------------------------------
# 📝 Documentation generation
# ------------------------------------------------------------
@app.post("/api/generate-docs", response_model=GenerateDocsResponse, response_model_exclude_none=True)
async def generate_docs(request: Request, generator: DocumentationGenerator = Depends(get_doc_generator)):
    return await _run_generation(request, generator)


@app.post("/api/generate-docs/download")
async def download_docs(request: Request, generator: DocumentationGenerator = Depends(get_doc_generator)):
    out = await _run_generation(request, generator)
    return Response(
        content=out.documentation,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"'},
    )


# ------------------------------------------------------------
# 💬 Clarifying-question chat
# ------------------------------------------------------------
@app.post("/api/chat/start", response_model=ChatStart)
def chat_start():
    return ChatStart(messages=[_turn(opening_message())])


@app.post("/api/chat", response_model=ChatReply)
def chat(req: ChatRequest):
    history = [t.to_message() for t in req.history]
    transcript = extend_transcript(req.message, history)
    return ChatReply(message=_turn(transcript[-1]), history=[_turn(m) for m in transcript])


# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "backend": settings.INFERENCE_BACKEND,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}
