import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from .core.config import settings
from .core.logging_setup import setup_logging
from .db.session import init_db
from .api.v1 import health, todos

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)
app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(todos.router,  prefix=settings.API_V1_PREFIX)

@app.on_event("startup")
def on_startup():
    setup_logging(settings.LOG_LEVEL)
    init_db()
    logger.info("%s ready, store at %s", settings.APP_NAME, settings.DATABASE_URL)

@app.exception_handler(SQLAlchemyError)
async def store_fault(request: Request, exc: SQLAlchemyError):
    logger.error("Task store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Task store failure"})

def run() -> None:
    import uvicorn
    uvicorn.run("todo_api.main:app", host=settings.HOST, port=settings.PORT)
