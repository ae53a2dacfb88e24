from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from typing import Dict, Any

from sqlpoco.config import config  # Global config
from sqlpoco.utils.logger import setup_logger
from ..services.poco_generation import ConversionOrchestrator, ConversionResult, InternalError

api_router = APIRouter(prefix='/api/v1')

# Setup logger for API
logger = setup_logger('api_routes')

# One orchestrator per configured dialect; it keeps no per-request state.
default_orchestrator = ConversionOrchestrator()

# error_type -> HTTP status; anything else is a client error
_STATUS_BY_ERROR_TYPE = {
    'internal': 500,
}


def _result_response(result: ConversionResult) -> JSONResponse:
    if result.success:
        return JSONResponse(result.to_dict())
    status_code = _STATUS_BY_ERROR_TYPE.get(result.error_type, 400)
    return JSONResponse(result.to_dict(), status_code=status_code)


@api_router.post('/poco/convert')
def convert_sql_to_poco(payload: Dict[str, Any] = Body(...)):
    """Convert the CREATE TABLE statements of ``sqlScript`` to data objects.

    Request:
    {
        "sqlScript": "CREATE TABLE Foo (Id INT NOT NULL);",
        "language": "csharp",          # optional, csharp | java | typescript | python
        "dialect": "sqlserver"         # optional, overrides the configured source dialect
    }
    """
    try:
        conversion_cfg = config.get('conversion', {})
        sql_script = payload.get('sqlScript')
        language = payload.get('language') or conversion_cfg.get('default_language', 'csharp')
        dialect = payload.get('dialect')

        if not isinstance(sql_script, str) or not sql_script.strip():
            return JSONResponse({'generatedCode': {}, 'success': False, 'error': 'SQL script is required', 'errorType': 'validation'}, status_code=400)

        max_chars = config.get('api', {}).get('max_script_chars')
        if max_chars and len(sql_script) > max_chars:
            return JSONResponse({'generatedCode': {}, 'success': False, 'error': f'SQL script exceeds the maximum size of {max_chars} characters', 'errorType': 'validation'}, status_code=413)

        orchestrator = ConversionOrchestrator(source_dialect=dialect) if dialect else default_orchestrator
        result = orchestrator.convert(sql_script, language)
        logger.info(f"/poco/convert language={language} success={result.success} tables={len(result.generated_code)}")
        return _result_response(result)

    except Exception as e:
        logger.error(f"An unhandled exception occurred in /poco/convert: {e}", exc_info=True)
        return _result_response(ConversionResult.failure(InternalError("Internal server error occurred during conversion")))


@api_router.get('/poco/languages')
def list_languages():
    """List the target languages accepted by /poco/convert."""
    return JSONResponse({
        'languages': ConversionOrchestrator.supported_languages(),
        'default': config.get('conversion', {}).get('default_language', 'csharp'),
    })


@api_router.get('/')
def root():
    """Root endpoint of the API.

    Returns a simple JSON message indicating the API is running.
    {
        "message": "API is running"
    }
    """
    return JSONResponse({"message": "API is running"})
