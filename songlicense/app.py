#!/usr/bin/env python3

import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from songlicense.routes import api
from songlicense.core import db
from songlicense.core.api import LicensingAPI
from songlicense.core.exceptions import InvalidPayloadError
from songlicense.configs import OPTIONS, LOG_LEVEL
from songlicense import __version__ as VERSION

logging.basicConfig(level=LOG_LEVEL.upper())

app = FastAPI(
    title="Songlicense API",
    description="Songlicense: record keeping for music licensing",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.api = LicensingAPI(db.init())

app.include_router(api.router, prefix="/v1/api")

@app.exception_handler(RequestValidationError)
async def invalid_request(request, exc: RequestValidationError):
    error = InvalidPayloadError(str(exc.errors()))
    return JSONResponse(status_code=400, content=error.to_dict())

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("songlicense.app:app", **OPTIONS)
