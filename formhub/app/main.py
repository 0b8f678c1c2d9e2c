# app/main.py
from fastapi import FastAPI
from formhub.app.core.config import settings
from formhub.db.session import engine
from formhub.db import Base
from formhub.db import models  # noqa: F401  registers tables on Base.metadata
from formhub.app.routers import forms

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

app.include_router(forms.router)


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)


@app.get("/health")
def health():
    return {"status": "ok"}
