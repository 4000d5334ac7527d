"""Main entry point for the Tag Cloud Generator API."""
import logging
import time
from typing import Optional
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from config import PORT, CORS_ORIGINS, LOG_LEVEL
from logger import setup_logging
from models.api import (
    FrequencyRequest,
    FrequencyResponse,
    WordFrequency,
    CloudRequest,
    CloudResponse,
    CloudWordOut,
)
from models.tag_cloud import TagCloud
from services.cloud_renderer import CloudRenderer
from services.errors import TagCloudError
from services.rank_selector import rank
from services.separator_set import SeparatorSet
from services.tag_cloud_generator import TagCloudGenerator

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Tag Cloud Generator",
    description="Word frequency statistics and HTML tag clouds for text documents",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services (will be done on startup)
tag_cloud_generator: Optional[TagCloudGenerator] = None
cloud_renderer: Optional[CloudRenderer] = None


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global tag_cloud_generator, cloud_renderer
    
    setup_logging(LOG_LEVEL)
    logger.info("Initializing Tag Cloud Generator services...")
    
    try:
        tag_cloud_generator = TagCloudGenerator()
        logger.info("Initialized TagCloudGenerator")
        
        cloud_renderer = CloudRenderer()
        logger.info("Initialized CloudRenderer")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Tag Cloud Generator API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "tag-cloud-generator",
        "version": "1.0.0"
    }


def _generator_for(separators: Optional[str]) -> TagCloudGenerator:
    """Configured generator, or a per-request one for a custom separator alphabet."""
    if separators is None:
        return tag_cloud_generator
    return TagCloudGenerator(
        separators=SeparatorSet.from_string(separators),
        min_font=tag_cloud_generator.font_scaler.min_font,
        max_font=tag_cloud_generator.font_scaler.max_font
    )


def _error_response(e: TagCloudError) -> HTTPException:
    logger.warning(f"Rejected request ({e.error.code}): {e.error.message}")
    return HTTPException(
        status_code=422,
        detail={
            "error": {
                "code": e.error.code,
                "message": e.error.message,
                "details": e.error.details
            }
        }
    )


def _build_cloud(request: CloudRequest) -> TagCloud:
    start_time = time.time()
    
    try:
        generator = _generator_for(request.separators)
        cloud = generator.generate(request.text, request.top_n, request.document_name)
    except TagCloudError as e:
        raise _error_response(e)
    except Exception as e:
        logger.error(f"Unexpected error generating tag cloud: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )
    
    latency_ms = int((time.time() - start_time) * 1000)
    logger.info(
        f"Tag cloud for {request.document_name} generated in {latency_ms}ms",
        extra={"extra": {"document_name": request.document_name, "top_n": request.top_n, "latency_ms": latency_ms}}
    )
    return cloud


@app.post("/frequencies", response_model=FrequencyResponse)
async def frequencies_endpoint(request: FrequencyRequest) -> FrequencyResponse:
    """
    Count every word of a text.
    
    Returns all canonical words ordered by count descending, ties broken by
    word ascending. An empty text yields an empty list.
    """
    generator = _generator_for(request.separators)
    frequency_map = generator.count_words(request.text)
    
    return FrequencyResponse(
        unique_words=len(frequency_map),
        total_words=sum(frequency_map.values()),
        frequencies=[WordFrequency(word=entry.word, count=entry.count) for entry in rank(frequency_map)]
    )


@app.post("/cloud", response_model=CloudResponse)
async def cloud_endpoint(request: CloudRequest) -> CloudResponse:
    """
    Generate a tag cloud as JSON.
    
    Raises:
        HTTPException: 422 for an empty document or an invalid top_n
    """
    cloud = _build_cloud(request)
    return CloudResponse(
        document_name=cloud.document_name,
        top_n=cloud.top_n,
        unique_words=cloud.unique_words,
        max_count=cloud.max_count,
        min_font=cloud.min_font,
        max_font=cloud.max_font,
        words=[
            CloudWordOut(word=word.word, count=word.count, font_size=word.font_size)
            for word in cloud.words
        ]
    )


@app.post("/cloud/html", response_class=HTMLResponse)
async def cloud_html_endpoint(request: CloudRequest) -> HTMLResponse:
    """Generate a tag cloud as a complete HTML page."""
    cloud = _build_cloud(request)
    return HTMLResponse(content=cloud_renderer.render(cloud))


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Tag Cloud Generator API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
