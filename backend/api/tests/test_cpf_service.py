import json
import logging
import pytest
from backend.api.services.cpf_service import CPFValidationService

logger = logging.getLogger("test_cpf_service")
logging.basicConfig(level=logging.INFO)


@pytest.fixture
def service():
    return CPFValidationService(logger=logger)


def test_valid_cpf_returns_original_input(service):
    status, body = service.handle_request("POST", json.dumps({"cpf": "529.982.247-25"}).encode())
    logger.info(f"[PASS/FAIL] test_valid_cpf_returns_original_input: status={status}, body={body}")
    assert status == 200
    assert body == {"cpf": "529.982.247-25", "isValid": True}


def test_invalid_cpf(service):
    status, body = service.handle_request("POST", b'{"cpf": "11111111111"}')
    assert status == 400
    assert body == {"error": "Invalid CPF"}


@pytest.mark.parametrize("raw", [b"{}", b'{"cpf": null}', b'{"cpf": ""}', b'{"cpf": 0}', b'{"cpf": false}', b"52998224725", b'{"name": "x"}', b"[1, 2]", b'"52998224725"'])
def test_missing_cpf(service, raw):
    status, body = service.handle_request("POST", raw)
    assert status == 400
    assert body == {"error": "CPF is required in the request body"}


@pytest.mark.parametrize("raw", [b'{"cpf": 52998224725}', b'{"cpf": ["x"]}', b'{"cpf": {"a": 1}}', b'{"cpf": true}', b'{"cpf": NaN}', b'{"cpf": []}', b'{"cpf": {}}'])
def test_non_string_cpf_is_internal_error(service, raw):
    status, body = service.handle_request("POST", raw)
    logger.info(f"[PASS/FAIL] test_non_string_cpf_is_internal_error: raw={raw}, status={status}, body={body}")
    assert status == 500
    assert body == {"error": "Internal server error"}


def test_null_body_is_internal_error(service):
    status, body = service.handle_request("POST", b"null")
    assert status == 500
    assert body == {"error": "Internal server error"}


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH", "OPTIONS"])
def test_method_not_allowed(service, method):
    status, body = service.handle_request(method, b"not json")
    assert status == 405
    assert body == {"error": "Method not allowed"}


def test_lowercase_post_is_accepted(service):
    status, _ = service.handle_request("post", b'{"cpf": "52998224725"}')
    assert status == 200


@pytest.mark.parametrize("raw", [b"not json", b"", b'{"cpf": ', None, b"\xff\xfe"])
def test_unparsable_body(service, raw):
    status, body = service.handle_request("POST", raw)
    logger.info(f"[PASS/FAIL] test_unparsable_body: status={status}, body={body}")
    assert status == 500
    assert body == {"error": "Internal server error"}


def test_str_body_is_accepted(service):
    status, body = service.handle_request("POST", '{"cpf": "09702414458"}')
    assert status == 200
    assert body["isValid"] is True


def test_default_logger():
    service = CPFValidationService()
    assert service.logger.name == "cpf_service"
