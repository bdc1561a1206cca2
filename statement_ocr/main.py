import uvicorn
from fastapi import FastAPI, UploadFile, File, HTTPException
from typing import List
from statement_ocr.config import AppConfig
from statement_ocr.logger import setup_logger
from statement_ocr.models.transaction_schema import ParseResult, ParseTextRequest
from statement_ocr.services.statement_ocr import StatementOCR
from statement_ocr.services.transaction_parser import parse_transactions
from statement_ocr.services.transaction_preview import build_preview
from statement_ocr.utils.file_handler import UploadValidationError, validate_statement_upload
from statement_ocr.utils.text_stats import get_text_stats

logger = setup_logger("statement_ocr")

app = FastAPI(title="Statement OCR Transaction Extractor")


def build_result(text: str, filename: str = None) -> ParseResult:
    transactions = parse_transactions(text)
    return ParseResult(
        filename=filename,
        text=text,
        stats=get_text_stats(text),
        transactions=transactions,
        previews=build_preview(transactions),
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/parse-text", response_model=ParseResult)
async def parse_text(request: ParseTextRequest):
    """
    Reconstruct transactions from text that was already recognized by an OCR engine.
    """
    return build_result(request.text)


@app.post("/extract-ocr", response_model=List[ParseResult])
async def extract_ocr(files: List[UploadFile] = File(...)):
    """
    For each uploaded statement image or scanned PDF:
    - Validate type and size
    - Run OCR (StatementOCR)
    - Reconstruct transactions from the recognized text

    Returns:
        JSON: One ParseResult per file.
    """
    results = []
    processor = StatementOCR()

    for file in files:
        data = await file.read()

        try:
            validate_statement_upload(file.filename, file.content_type, len(data))
        except UploadValidationError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)

        try:
            text = processor.extract_text(data, file.content_type)
        except Exception as e:
            logger.error(f"Error during OCR of {file.filename}: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Error during processing: {str(e)}")

        results.append(build_result(text, filename=file.filename))
        logger.info(f"Processed {file.filename}: {len(results[-1].transactions)} transactions")

    return results


def run():
    """Serve the API with uvicorn on AppConfig.HOST / AppConfig.PORT."""
    uvicorn.run(app, host=AppConfig.HOST, port=AppConfig.PORT)


if __name__ == "__main__":
    run()
