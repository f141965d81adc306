import uvicorn
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from api.utils.envelope import validation_response
from api.utils.logger import logger, myself, LEIF
from config import Config, Network  # api specific config
from core.config import PROJECT_NAME, API_V1_STR
from db.session import init_db

from api.v1.routes.projects import projects_router
from api.v1.routes.investments import investments_router
from api.v1.routes.returns import returns_router

CFG = Config[Network]
DEBUG = CFG.debug

app = FastAPI(
    title=PROJECT_NAME,
    description="Crowdfunding projects, investments, stakes and returns",
    docs_url="/api-docs",
    openapi_url="/api-docs/openapi.json"
)

#region Routers
app.include_router(projects_router,    prefix=f"{API_V1_STR}/projects",    tags=["projects"])
app.include_router(investments_router, prefix=f"{API_V1_STR}/investments", tags=["investments"])
app.include_router(returns_router,     prefix=f"{API_V1_STR}/returns",     tags=["returns"])
#endregion Routers

app.add_middleware(
    CORSMiddleware,
    allow_origins=CFG.corsOrigins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event('startup')
async def startup():
    logger.info(' Begin... ')
    init_db()

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(req: Request, exc: RequestValidationError):
    return validation_response(exc.errors())

# all requests are timed and logged
@app.middleware("http")
async def add_logging_and_process_time(req: Request, call_next):
    try:
        beg = time.time()
        resNext = await call_next(req)
        tot = str(round((time.time() - beg) * 1000))
        resNext.headers["X-Process-Time-MS"] = tot
        logger.log(LEIF, f"""{req.url}: {tot}ms""".strip())
        return resNext

    except Exception as e:
        logger.error(f'ERR:middleware:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={
            'statusCode': status.HTTP_500_INTERNAL_SERVER_ERROR,
            'responseMessage': 'Something went wrong',
        })

@app.get("/api/ping")
async def ping():
    return {"hello": "world"}

@app.get("/api/test", tags=["hello"])
async def hello_world():
    return {"statusCode": status.HTTP_200_OK, "responseMessage": "Hello, World!"}

# MAIN
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", reload=DEBUG, port=8000)
