import logging
import os
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.constants import ALLOWED_ORIGINS, CORS_MAX_AGE, DEFAULT_HOST, DEFAULT_PORT
from app.routes.diagram import router as diagram_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

load_dotenv(dotenv_path=".env")
app = FastAPI(
    title="Network Diagram Backend",
    description="Renders IPv4 network diagrams and keeps the last one per email",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=CORS_MAX_AGE,
)


@app.exception_handler(RequestValidationError)
async def query_validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.warning(f"Rejected query for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.get("/")
def read_root():
    return {"Network Diagram Backend": "Online"}


@app.on_event("startup")
def open_history_store_event():
    from app.database.connection import create_pool
    from app.services.history_store import HistoryStore
    store = None
    try:
        store = HistoryStore(create_pool())
        store.ensure_schema()
    except Exception as e:
        logging.critical(f"Failed to connect to the history database: {e}")
        if store is not None:
            store.close()
        raise
    app.state.history_store = store
    logging.info("Started")


@app.on_event("shutdown")
def close_history_store_event():
    store = getattr(app.state, "history_store", None)
    if store is not None:
        store.close()


app.include_router(diagram_router)


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.getenv("HOST", DEFAULT_HOST),
        port=int(os.getenv("PORT", DEFAULT_PORT)),
    )
