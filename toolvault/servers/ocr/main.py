"""Receipt OCR HTTP endpoint - FastAPI"""
import logging
import sys
from typing import Optional

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from toolvault.config import config
from toolvault.servers.ocr.src import NO_IMAGE_ERROR, ReceiptOCRClient, VisionTextRecognizer


logger = logging.getLogger(__name__)


class OcrRequest(BaseModel):
    """Body of POST /api/ocr."""
    image: Optional[str] = None


def create_app(ocr_client: Optional[ReceiptOCRClient] = None) -> FastAPI:
    """
    Build the OCR app.

    Args:
        ocr_client: Client to use; defaults to the configured Vision provider
    """
    client = ocr_client or ReceiptOCRClient(VisionTextRecognizer.from_config(config))
    app = FastAPI(title="ToolVault Receipt OCR")

    @app.post("/api/ocr")
    async def ocr(request: OcrRequest) -> JSONResponse:
        result = await client.scan(request.image)

        if result.success:
            code = status.HTTP_200_OK
        elif result.error == NO_IMAGE_ERROR:
            code = status.HTTP_400_BAD_REQUEST
        else:
            code = status.HTTP_500_INTERNAL_SERVER_ERROR

        return JSONResponse(result.model_dump(mode="json", exclude_none=True), status_code=code)

    return app


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    uvicorn.run(create_app(), host=config.api_host, port=config.api_port)
