from fastapi import FastAPI, Query, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging
from app.core.config import API_DESCRIPTION, API_TITLE, API_VERSION, CORS_ORIGINS
from app.core.logging import configure_logging
from app.schemas import HealthResponse, InsightResponse
from app.services.health import build_health_status
from app.services.sales_analyzer import SalesAnalyzer

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

analyzer = SalesAnalyzer()


@app.get("/sales-insights", response_model=InsightResponse)
def sales_insights(
    question: str = Query("", description="Your sales or inventory question")
):
    """
    Get a canned insight about retail sales and inventory.

    Example questions:
    - "How are Shoes doing?"
    - "Show me inventory levels"
    - "What is the sales trend?"
    """
    try:
        return analyzer.analyze_sales_question(question)
    except Exception as e:
        logger.error(f"Error in sales_insights: {e}")
        raise HTTPException(status_code=500, detail="Error processing your question")


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Service health check endpoint"""
    return build_health_status()
