# app/main.py
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from app.routers.software_engineers import router as software_engineers_router

app = FastAPI(
    title="Software Engineer Profiles API",
    description="CRUD for software engineer profiles with LLM-generated learning path recommendations",
    version="0.1.0"
)

app.include_router(software_engineers_router)


@app.get("/hello", response_class=PlainTextResponse, summary="동작 확인용 인사")
def hello():
    return "Hello World"
