from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.deps import get_pipeline
from app.pipeline import AssistantPipeline, decode_payload

router = APIRouter()


@router.get("/")
def root():
    return {"status": "✅ Backend THE BOX rodando!", "version": "1.0"}


@router.get("/api/health")
def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.post("/api/ai/assistant")
async def ai_assistant(request: Request, pipeline: AssistantPipeline = Depends(get_pipeline)):
    payload = decode_payload(await request.body())
    # the upstream call blocks, keep it off the event loop
    result = await run_in_threadpool(pipeline.handle, payload)
    return JSONResponse(status_code=result.status_code, content=result.body)
