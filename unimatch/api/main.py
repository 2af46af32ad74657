# unimatch/api/main.py

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unimatch.core import config
from unimatch.utils.logger import init_logger
from unimatch.api.routes.chat import router as chat_router
from unimatch.api.routes.health import router as health_router


init_logger(config.LOG_LEVEL)

app = FastAPI(
    title=config.APP_NAME,
    version=config.VERSION,
    openapi_url="/api/v1/openapi.json",
    docs_url="/api/v1/docs"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(chat_router)    # /api/v1/chat
app.include_router(health_router)  # /api/v1/health


if __name__ == "__main__":
    uvicorn.run("unimatch.api.main:app", host="127.0.0.1", port=5000)
