from fastapi import FastAPI, Request, Response
from loguru import logger

from app.api.cors import CORS_HEADERS
from app.api.routes import router
from app.config import configure_logging, get_settings

settings = get_settings()

configure_logging(settings.log_level)

app = FastAPI(title="THE BOX", version="1.0")


@app.middleware("http")
async def cors(request: Request, call_next):
    """Answer every preflight directly and stamp CORS headers on all responses."""
    # not CORSMiddleware: its preflight needs an Origin header and answers with body "OK"
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response: Response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("{} {}", request.method, request.url.path)
    response: Response = await call_next(request)
    logger.info("→ {}", response.status_code)
    return response


app.include_router(router)


@app.on_event("startup")
async def startup():
    if not settings.deepseek_api_key:
        logger.warning("DEEPSEEK_API_KEY not set, assistant requests will fail with 500")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
