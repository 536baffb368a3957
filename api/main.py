"""
FastAPI API for Contract Analyzer
"""
from fastapi import FastAPI, HTTPException, Form
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Dict, Any
import logging
import os
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from contract_analyzer import (
    ContractAnalyzer,
    MalformedReplyError,
    SchemaViolationError
)

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Contract Analyzer API",
    description="API for extracting key facts from real estate contract text",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify allowed origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize analyzer (singleton)
analyzer = None

def get_analyzer() -> ContractAnalyzer:
    """Get or create analyzer instance"""
    global analyzer
    if analyzer is None:
        analyzer = ContractAnalyzer()
    return analyzer


class AnalyzeContractRequest(BaseModel):
    """Request model for contract analysis"""
    contract_text: str = Field(..., description="Plain text extracted from the contract document")

    class Config:
        json_schema_extra = {
            "example": {
                "contract_text": """1. IDENTIFICATION OF PARTIES AND PROPERTY
Buyer: John Doe
Seller: Jane Smith
2.4 Property known as:
123 Main St, Denver, CO 80202
3. DATES, DEADLINES
Closing Date 03/01/2025
4. PURCHASE PRICE AND TERMS
Purchase Price $500,000"""
            }
        }


def _run_analysis(contract_text: str) -> Dict[str, Any]:
    try:
        record = get_analyzer().analyze(contract_text)
        return record.to_dict()
    except MalformedReplyError as e:
        logger.error(f"Malformed extraction reply: {e.cleaned_text!r}")
        raise HTTPException(
            status_code=502,
            detail={
                "error": "MalformedReplyError",
                "message": str(e),
                "reply": e.cleaned_text,
                "type": "malformed_reply"
            }
        )
    except SchemaViolationError as e:
        raise HTTPException(
            status_code=502,
            detail={
                "error": "SchemaViolationError",
                "message": str(e),
                "missing_fields": e.missing_fields,
                "type": "schema_violation"
            }
        )
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "ValueError",
                "message": str(e),
                "type": "invalid_input"
            }
        )
    except Exception as e:
        logger.exception("Unexpected error analyzing contract")
        raise HTTPException(
            status_code=500,
            detail={
                "error": "InternalServerError",
                "message": f"An unexpected error occurred: {str(e)}",
                "type": "server_error"
            }
        )


# API Endpoints
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Contract Analyzer API",
        "version": "1.0.0",
        "endpoints": {
            "POST /analyze": "Analyze contract text (JSON format, use \\n for newlines)",
            "POST /analyze/text": "Analyze contract text (Form-data format, accepts literal line breaks)",
            "GET /health": "Health check"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    try:
        val = get_analyzer()
        return {
            "status": "healthy",
            "analyzer_initialized": True,
            "prompts_loaded": len(val.prompts) > 0
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "error": str(e)
        }


@app.post("/analyze", response_model=Dict[str, Any])
def analyze_contract(request: AnalyzeContractRequest):
    """
    Analyze contract text (JSON format).

    This endpoint:
    1. Keeps only the contract sections relevant to extraction
    2. Extracts structured data from them using the LLM
    3. Validates the reply and normalizes deadline dates
    """
    return _run_analysis(request.contract_text)


@app.post("/analyze/text", response_model=Dict[str, Any])
def analyze_contract_text(contract_text: str = Form(..., description="Contract text with line breaks")):
    """
    Analyze contract text (Form-data format).

    Accepts multi-line text directly without needing to escape newlines as \\n.
    """
    return _run_analysis(contract_text)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
