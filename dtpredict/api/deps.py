from fastapi import Header, HTTPException, Request

from dtpredict.config import settings
from dtpredict.core.engine import PredictorEngine


# The engine is built once per app in the lifespan hook
def get_engine(request: Request) -> PredictorEngine:
    return request.app.state.engine


def require_api_key(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")
