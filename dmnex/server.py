from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .settings import Settings
from .logging_config import setup_logging
from .errors import DmnexError
from .engine.pipeline import generate_from_tree
from .service import ExampleService


@dataclass
class AppState:
    settings: Settings
    service: ExampleService


def make_state() -> AppState:
    load_dotenv()
    st = Settings()
    setup_logging(st)
    return AppState(settings=st, service=ExampleService(st))


class GenerateRequest(BaseModel):
    filename: str
    content: str


app = FastAPI(title="dmnex", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

STATE = make_state()


@app.exception_handler(DmnexError)
async def dmnex_error(_request: Request, exc: DmnexError):
    return JSONResponse(status_code=400, content={"ok": False, "errors": [exc.as_dict()]})


@app.get("/health")
def health():
    return {
        "ok": True,
        "file_extension": STATE.settings.file_extension,
        "max_upload_bytes": STATE.settings.max_upload_bytes,
    }


def _check_size(nbytes: int) -> None:
    if nbytes > STATE.settings.max_upload_bytes:
        raise DmnexError(
            "File too large",
            f"uploads are limited to {STATE.settings.max_upload_bytes} bytes",
        )


@app.post("/generate")
def generate(body: GenerateRequest):
    """Generate example input values for an uploaded DMN document.

    body:
      {"filename": "loan.dmn", "content": "<definitions ...>...</definitions>"}
    """
    _check_size(len(body.content.encode("utf-8")))
    examples = STATE.service.generate_from_file(body.filename, body.content)
    return {"ok": True, "filename": body.filename, "examples": examples}


@app.post("/generate/tree")
def generate_tree(body: dict[str, Any], request: Request):
    """Engine-only surface: body is an already decoded document tree."""
    _check_size(int(request.headers.get("content-length") or 0))
    return generate_from_tree(body, STATE.settings)
