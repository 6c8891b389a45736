import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from seo_inspector.analysis import analyze_url
from seo_inspector.config import LOG_LEVEL
from seo_inspector.errors import AnalysisError
from seo_inspector.models import AnalyzeRequest, SeoAnalysisResult
from seo_inspector.report import generate_pdf, report_filename

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="SEO Tag Inspector", version="1.0.0")


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    message = "Invalid URL provided" if request.url.path == "/api/analyze" else "Invalid request body"
    return JSONResponse(
        status_code=400,
        content={"message": message, "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(AnalysisError)
async def analysis_failed(request: Request, exc: AnalysisError):
    return JSONResponse(status_code=500, content={"message": str(exc)})


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"message": "Failed to analyze the provided URL"})


@app.post(
    "/api/analyze",
    response_model=SeoAnalysisResult,
    response_model_exclude_none=True,
)
def run_analysis(req: AnalyzeRequest):
    return analyze_url(req.url)


@app.post("/api/report/pdf")
def export_pdf(data: SeoAnalysisResult):
    pdf_bytes = generate_pdf(data)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={report_filename(data)}"},
    )
