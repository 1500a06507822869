
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging
import uvicorn
import os
from backend.api.services.cpf_service import CPFValidationService, ERROR_INTERNAL

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
CPF_ROUTE = os.getenv("CPF_ROUTE", "/api/ms-cpf")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

app = FastAPI(title="CPF Validation API", version="1.0.0")


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
    """
    Converte qualquer falha não tratada em resposta 500 genérica.
    """
    logger.exception(f"Erro inesperado em {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": ERROR_INTERNAL})


@app.get("/")
async def root() -> dict:
    """
    Endpoint de status da API.
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


######### CPF endpoint (acesso anônimo)
cpf_service = CPFValidationService()


@app.api_route(CPF_ROUTE, methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def validate_cpf(request: Request) -> JSONResponse:
    """
    Endpoint de validação de CPF. Aceita apenas POST com corpo {"cpf": "..."};
    os demais métodos recebem 405.
    Parâmetros:
        request (Request): requisição HTTP
    Retorno:
        JSONResponse: resultado da validação
    """
    logger.info(f"Requisição de validação de CPF: method={request.method}")
    raw_body = await request.body() if request.method == "POST" else None
    status_code, body = cpf_service.handle_request(request.method, raw_body)
    logger.info(f"Validação de CPF concluída: status={status_code}")
    return JSONResponse(status_code=status_code, content=body)


######### ------------------------------ #########
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
