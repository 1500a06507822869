"""
Serviço de validação de CPF: encapsula parsing do corpo, mapeamento de status e
chamada ao validador. Independente do framework HTTP, facilita testes e reuso.
"""
from typing import Any, Dict, Optional, Tuple, Union
import json
import logging
from backend.utils.cpf_utils import CPFUtils

ERROR_METHOD_NOT_ALLOWED = "Method not allowed"
ERROR_CPF_REQUIRED = "CPF is required in the request body"
ERROR_INVALID_CPF = "Invalid CPF"
ERROR_INTERNAL = "Internal server error"

HandlerResult = Tuple[int, Dict[str, Any]]


class CPFValidationService:
    def __init__(self, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            logger = logging.getLogger("cpf_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def handle_request(self, method: str, raw_body: Optional[Union[bytes, str]]) -> HandlerResult:
        """
        Trata uma requisição de validação de CPF.
        Parâmetros:
            method (str): método HTTP
            raw_body (bytes | str | None): corpo bruto da requisição
        Retorno:
            tuple: (status HTTP, corpo JSON da resposta)
        """
        if method.upper() != "POST":
            self.logger.warning(f"Método não permitido: method={method}")
            return 405, {"error": ERROR_METHOD_NOT_ALLOWED}
        try:
            payload = json.loads(raw_body)
            return self.validate_payload(payload)
        except Exception as exc:
            self.logger.exception(f"Erro ao processar requisição de CPF: {exc}")
            return 500, {"error": ERROR_INTERNAL}

    def validate_payload(self, payload: Any) -> HandlerResult:
        """
        Valida o corpo JSON já decodificado.
        Parâmetros:
            payload: corpo JSON (esperado dict com campo cpf)
        Retorno:
            tuple: (status HTTP, corpo JSON da resposta)
        """
        self.logger.info(f"Recebendo payload de validação: {payload}")
        if payload is None:
            self.logger.error("Corpo JSON nulo na requisição de CPF")
            return 500, {"error": ERROR_INTERNAL}
        cpf = payload.get("cpf") if isinstance(payload, dict) else None
        # Ausente, null, "", 0 ou false: campo obrigatório não informado
        if cpf is None or cpf == "" or cpf == 0:
            self.logger.warning(f"Payload sem CPF: {payload}")
            return 400, {"error": ERROR_CPF_REQUIRED}
        if not isinstance(cpf, str):
            self.logger.error(f"CPF com tipo inesperado: type={type(cpf).__name__}, cpf={cpf}")
            return 500, {"error": ERROR_INTERNAL}

        if not CPFUtils.is_valid_cpf(cpf):
            self.logger.warning(f"CPF inválido detectado: cpf={cpf}")
            return 400, {"error": ERROR_INVALID_CPF}

        result = {"cpf": cpf, "isValid": True}
        self.logger.info(f"CPF válido: {result}")
        return 200, result
