from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime
import os
from dotenv import load_dotenv
import logging
from contextlib import asynccontextmanager

from ..config.completion import CompletionConfig, OrchestratorConfig
from ..config.database import db_config
from ..services.database import db_manager
from ..services.completion_service import OpenAICompletionService
from ..services.exceptions import BoardroomError
from .responses import error_response
from .routes import boards, conversations

load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    completion_service = OpenAICompletionService(CompletionConfig.from_env())
    try:
        await db_manager.initialize()
        await completion_service.initialize()

        app.state.db = db_manager
        app.state.completion_service = completion_service
        app.state.orchestrator_config = OrchestratorConfig.from_env()

        logger.info("Application startup complete")

    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        await completion_service.close()
        raise

    yield

    # Shutdown
    try:
        await completion_service.close()
        await db_manager.close()
        logger.info("Application shutdown complete")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")

app = FastAPI(title="Boardroom Persona API", lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(boards.router)
app.include_router(conversations.router)


@app.exception_handler(BoardroomError)
async def boardroom_error_handler(request: Request, exc: BoardroomError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return error_response(422, "Validation failed", errors)


@app.get("/")
async def root():
    return {"message": "Boardroom Persona API", "status": "running"}

@app.get("/api/health")
async def health_check():
    """Basic health check"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}

@app.get("/api/health/detailed")
async def detailed_health_check(request: Request):
    """Detailed system health check including database and completion client"""
    health_data = {
        "timestamp": datetime.now().isoformat(),
        "components": {}
    }

    # API health
    health_data["components"]["api"] = {
        "status": "healthy",
        "version": "1.0.0"
    }

    # Database health
    db = getattr(request.app.state, "db", None)
    if db is not None:
        try:
            db_health = await db.health_check()
            health_data["components"]["database"] = {
                "status": "healthy" if all(db_health.values()) else "degraded",
                "databases": db_health,
                "connection_pools": db.get_pool_status(),
                "details": db_config.get_health_check_config()
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            health_data["components"]["database"] = {"status": "error", "error": str(e)}
    else:
        health_data["components"]["database"] = {"status": "not_initialized"}

    # Completion client
    completion_service = getattr(request.app.state, "completion_service", None)
    if completion_service is not None and hasattr(completion_service, "get_status"):
        status = completion_service.get_status()
        health_data["components"]["completion"] = {
            "status": "healthy" if status["configured"] else "degraded",
            **status
        }
    else:
        health_data["components"]["completion"] = {"status": "not_initialized"}

    # Overall status
    all_healthy = all(
        comp.get("status") == "healthy"
        for comp in health_data["components"].values()
    )
    health_data["status"] = "healthy" if all_healthy else "degraded"

    return health_data
