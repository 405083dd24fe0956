from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .routes import router
from .core import REQUESTS_TOTAL, ensure_indexes, init_metrics, mongo_startup, shutdown_connections
from .errors import SocialAppError
import logging
from pythonjsonlogger import jsonlogger

# setup structured logging
logger = logging.getLogger('socialapp')
handler = logging.StreamHandler()
formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.INFO)

app = FastAPI(title="SocialApp API", version="0.3.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(router, prefix="/api")

@app.get('/healthz')
async def healthz():
    return {'status': 'ok'}

@app.exception_handler(SocialAppError)
async def social_app_error_handler(request: Request, exc: SocialAppError):
    logger.info({'msg': 'request_failed', 'error': exc.error_name, 'path': request.url.path, **exc.context})
    return JSONResponse(status_code=exc.status_code, content={'error': exc.error_name, 'msg': exc.message})

@app.middleware('http')
async def log_requests(request: Request, call_next):
    logger.info({'msg':'request_start','method':request.method,'path':request.url.path})
    response = await call_next(request)
    REQUESTS_TOTAL.labels(method=request.method, status=str(response.status_code)).inc()
    logger.info({'msg':'request_end','status': response.status_code})
    return response

@app.on_event("startup")
async def startup():
    # metrics are best-effort, the database is not
    init_metrics()
    await mongo_startup()
    await ensure_indexes()

@app.on_event("shutdown")
async def shutdown():
    await shutdown_connections()
