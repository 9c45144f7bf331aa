"""
VitaGuard Health Risk Analysis - FastAPI Application

Thin HTTP surface over the analysis orchestrator for the web UI:
- Questionnaire analysis (Gemini with deterministic fallback)
- Questionnaire reference data
- Health checks
"""
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from vitaguard.config import get_settings
from vitaguard.core import AnalysisOrchestrator, GeminiAnalysisClient, GeminiClient, Questionnaire, Symptom
from vitaguard.core.llm.prompt_builder import (
    ALCOHOL_LABELS,
    EXERCISE_LABELS,
    SLEEP_LABELS,
    SMOKING_LABELS,
)
from vitaguard.models.assessment import (
    AnalysisResponse,
    HealthResponse,
    QuestionnaireReference,
)
from vitaguard.utils import get_logger, setup_logging

# Load environment variables
load_dotenv()

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)
logger = get_logger(__name__)

START_TIME = datetime.now()


def build_orchestrator() -> AnalysisOrchestrator:
    """Construct the process-wide orchestrator and its Gemini client."""
    return AnalysisOrchestrator(GeminiAnalysisClient(GeminiClient()))


# ---- Application Lifespan ----

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared orchestrator once per process."""
    app.state.orchestrator = build_orchestrator()
    logger.info("API ready to accept requests")
    yield
    logger.info("VitaGuard API shut down.")


# ---- FastAPI Application ----

app = FastAPI(
    title="VitaGuard Health Risk Analysis API",
    description="Questionnaire-based health risk analysis (Gemini with deterministic fallback)",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


def get_orchestrator(request: Request) -> AnalysisOrchestrator:
    return request.app.state.orchestrator


def _health(orchestrator: AnalysisOrchestrator) -> HealthResponse:
    gemini = orchestrator.ai_client.client
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
        gemini_configured=gemini.is_configured,
        gemini_model=gemini.config.model_name,
        timestamp=datetime.now().isoformat(),
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root(orchestrator: AnalysisOrchestrator = Depends(get_orchestrator)):
    """API root - health check."""
    return _health(orchestrator)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(orchestrator: AnalysisOrchestrator = Depends(get_orchestrator)):
    """Health check endpoint."""
    return _health(orchestrator)


@app.post(f"{settings.api_prefix}/assessments/analyze", response_model=AnalysisResponse, tags=["Assessment"])
async def analyze_assessment(
    questionnaire: Questionnaire,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
):
    """
    Analyse a submitted questionnaire.

    Always answers with a complete analysis; ``source`` tells whether Gemini
    or the local engine produced it.
    """
    analysis = await orchestrator.analyze_async(questionnaire)
    logger.info(
        f"Assessment analysed: source={analysis.source.value} "
        f"score={analysis.risk_score} level={analysis.risk_level.value}"
    )
    return AnalysisResponse(**analysis.to_dict())


@app.get(f"{settings.api_prefix}/reference/questionnaire", response_model=QuestionnaireReference, tags=["Reference"])
async def questionnaire_reference():
    """Symptom vocabulary and lifestyle codes accepted by the analysis endpoint."""
    return QuestionnaireReference(
        symptoms=[s.value for s in Symptom],
        sleep={k.value: v for k, v in SLEEP_LABELS.items()},
        exercise={k.value: v for k, v in EXERCISE_LABELS.items()},
        smoking={k.value: v for k, v in SMOKING_LABELS.items()},
        alcohol={k.value: v for k, v in ALCOHOL_LABELS.items()},
    )


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
