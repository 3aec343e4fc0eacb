import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from course_management.core.config import LOG_LEVEL
from course_management.core.errors import OutcomeKind
from course_management.core.logging_middleware import LoggingMiddleware
from course_management.db.init_db import init_db
from course_management.routers.courses import router as courses_router
from course_management.routers.enrolments import router as enrolments_router

logging.basicConfig(level=LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Course Management API", lifespan=lifespan)

# Middleware
app.add_middleware(LoggingMiddleware)


# Malformed bodies are bad input (400), not FastAPI's default 422
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "kind": OutcomeKind.BAD_INPUT.value,
                "message": "Malformed or missing fields",
                "errors": jsonable_encoder(exc.errors()),
            }
        },
    )


@app.get("/", response_class=PlainTextResponse)
def welcome():
    return "Welcome to the Course Management API"


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Include routers
app.include_router(courses_router, prefix="/courses", tags=["courses"])
app.include_router(enrolments_router, prefix="/enrolments", tags=["enrolments"])
