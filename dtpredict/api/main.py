from fastapi import FastAPI
from contextlib import asynccontextmanager
from dtpredict.api.routes import router
from dtpredict.core.engine import PredictorEngine
from dtpredict.log import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if getattr(app.state, "engine", None) is None:
        app.state.engine = PredictorEngine()
    yield

app = FastAPI(title="Dragon Tiger Predictor", lifespan=lifespan)
app.include_router(router)

@app.get("/")
def home():
    return {"ok": True, "app": "Dragon Tiger Predictor"}
