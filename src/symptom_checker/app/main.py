# src/symptom_checker/app/main.py
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from symptom_checker.app.api_router import router
from symptom_checker.app.factory import create_app_context
from symptom_checker.core.exceptions import StorageError, ValidationError
from symptom_checker.settings import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


# --- Lifespan Context Manager ---
@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    logger.info("Lifespan startup: Opening application context...")
    app_instance.state.context = create_app_context(settings)
    logger.info("Lifespan startup: Application context ready.")
    yield
    logger.info("Lifespan shutdown: Closing application context...")
    app_instance.state.context.close()


app = FastAPI(title="AI Symptom Checker", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    # malformed JSON or a non-string "symptoms" field
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400, content={"error": "Please provide symptoms text."}
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


app.include_router(router, prefix="/api")

CURRENT_FILE_PATH = Path(__file__).resolve()
PROJECT_ROOT_DIR = CURRENT_FILE_PATH.parents[3]
FRONTEND_DIR = PROJECT_ROOT_DIR / "frontend"


@app.get("/", response_class=HTMLResponse)
async def serve_frontend_route(request: Request):
    index_html_path = FRONTEND_DIR / "index.html"
    if not index_html_path.is_file():
        logger.error(f"Frontend file not found at {index_html_path}")
        return HTMLResponse(
            content="<h1>Frontend not found</h1><p>Please check server configuration.</p>",
            status_code=404,
        )

    try:
        html_content = index_html_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(
            f"Could not read frontend file {index_html_path}: {e}", exc_info=True
        )
        return HTMLResponse(content="<h1>Error serving frontend</h1>", status_code=500)
    return HTMLResponse(content=html_content, status_code=200)


def run() -> None:
    logger.info(f"Server running on http://localhost:{settings.app_port}")
    uvicorn.run(
        "symptom_checker.app.main:app", host=settings.app_host, port=settings.app_port
    )


if __name__ == "__main__":
    run()
