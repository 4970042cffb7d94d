"""
Gestionnaires d'exceptions.
- Les erreurs HTTP sont rendues sous la forme {"error": <detail>} attendue par le front.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre le handler HTTPException (401, 400, 503, 404, ...) et celui
    des erreurs de validation FastAPI (422).
    - Même corps pour toutes les causes d'un même code (pas de fuite d'information).
    """
    @app.exception_handler(StarletteHTTPException)
    async def json_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"error": "invalid_request"})
