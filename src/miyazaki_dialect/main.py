from fastapi import FastAPI, Request, status, Depends
from fastapi.responses import HTMLResponse, JSONResponse
from dotenv import load_dotenv
from pydantic import ValidationError
from miyazaki_dialect.client import get_completion_gateway
from miyazaki_dialect.errors import ConfigurationError, UpstreamError, TranslatorError
from miyazaki_dialect.page import render_translator_html
from miyazaki_dialect.request import Direction, TranslateRequest
from miyazaki_dialect.responses import ErrorResponse, TranslationResponse
from miyazaki_dialect.settings import get_settings
from miyazaki_dialect.translation import CompletionGateway
import logging
import uvicorn

load_dotenv()


app = FastAPI(
    title="Miyazaki Dialect Translation API",
    description="API for translating between Miyazaki dialect and standard Japanese using Google Gemini.",
)

logger = logging.getLogger("uvicorn.error")

INVALID_TEXT_MESSAGE = "テキストが提供されていないか、無効です"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error(f"Configuration error on {request.url.path}: {exc.message}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


@app.get("/", response_class=HTMLResponse)
def read_root():
    return render_translator_html()


async def run_translation(
    request: Request, direction: Direction, gateway: CompletionGateway
) -> JSONResponse:
    try:
        body = await request.json()
        translation_request = TranslateRequest.model_validate(body)

        logger.info(f"Translating {len(translation_request.text)} characters ({direction.value})")
        translated_text = await gateway.translate(translation_request.text, direction)

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=TranslationResponse(translated_text=translated_text).model_dump(
                by_alias=True
            ),
        )
    except ValidationError as e:
        logger.error(f"Invalid translation request: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_TEXT_MESSAGE)
    except UpstreamError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)
    except Exception as e:
        logger.error(f"Error translating text: {e}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, TranslatorError.message
        )


translation_responses = {
    status.HTTP_200_OK: {"model": TranslationResponse},
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@app.post(
    "/api/translate",
    summary="Translate Miyazaki dialect to standard Japanese",
    response_model=TranslationResponse,
    responses=translation_responses,
)
async def translate_to_standard(
    request: Request,
    gateway: CompletionGateway = Depends(get_completion_gateway),
):
    return await run_translation(request, Direction.TO_STANDARD, gateway)


@app.post(
    "/api/to-dialect",
    summary="Translate standard Japanese to Miyazaki dialect",
    response_model=TranslationResponse,
    responses=translation_responses,
)
async def translate_to_dialect(
    request: Request,
    gateway: CompletionGateway = Depends(get_completion_gateway),
):
    return await run_translation(request, Direction.TO_DIALECT, gateway)


def run():
    settings = get_settings()
    uvicorn.run("miyazaki_dialect.main:app", host=settings.HOST, port=settings.PORT)
