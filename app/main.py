import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.routes.auth import router as auth_router
from app.routes.chatbot import router as chat_router
from app.routes.quiz import router as quiz_router
from app.schemas.common import ErrorResponse

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,  # Frontend URL
    allow_credentials=True,  # Session cookie
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, error: str, is_form_error: bool = False) -> JSONResponse:
    body = ErrorResponse(error=error, is_form_error=is_form_error)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    response = _error_response(
        exc.status_code, str(exc.detail), getattr(exc, "is_form_error", False)
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message, is_form_error=True)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    if settings.is_production:
        error = "Internal Server Error"
    else:
        error = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, error)


@app.get("/")
def read_root():
    return {"message": f"{settings.PROJECT_NAME} is running"}


app.include_router(auth_router, prefix=f"{settings.API_PREFIX}/auth")
app.include_router(quiz_router, prefix=f"{settings.API_PREFIX}/quiz")
app.include_router(chat_router, prefix=f"{settings.API_PREFIX}/chat")
