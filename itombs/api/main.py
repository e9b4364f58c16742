"""Standalone FastAPI backend for the family tree."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itombs.api.routes import router

app = FastAPI(title="iTombs Family Tree API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
