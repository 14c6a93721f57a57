from unittest.mock import AsyncMock, MagicMock

import pytest

from sendgrid_kit.auth import Authentication
from sendgrid_kit.session import Session

RED_DOT_BYTES = bytes(
    [
        137, 80, 78, 71, 13, 10, 26, 10, 0, 0, 0, 13, 73, 72, 68, 82, 0, 0, 0,
        5, 0, 0, 0, 5, 8, 6, 0, 0, 0, 141, 111, 38, 229, 0, 0, 0, 28, 73, 68,
        65, 84, 8, 215, 99, 248, 255, 255, 63, 195, 127, 6, 32, 5, 195, 32, 18,
        132, 208, 49, 241, 130, 88, 205, 4, 0, 14, 245, 53, 203, 209, 142, 14,
        31, 0, 0, 0, 0, 73, 69, 78, 68, 174, 66, 96, 130,
    ]
)

RED_DOT_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAUAAAAFCAYAAACNbyblAAAAHElEQVQI12P4//8/w38GIAXD"
    "IBKE0DHxgljNBAAO9TXL0Y4OHwAAAABJRU5ErkJggg=="
)


@pytest.fixture
def red_dot():
    """5x5 빨간 점 PNG 바이트"""
    return RED_DOT_BYTES


@pytest.fixture
def api_key_auth():
    """테스트용 API 키 인증"""
    return Authentication.api_key("SG.test-api-key")


@pytest.fixture
def credential_auth():
    """테스트용 username/password 인증"""
    return Authentication.credential("nuung", "secret-password")


@pytest.fixture
def mock_response():
    """aiohttp 응답 형태의 mock (200, JSON 본문)"""
    response = MagicMock()
    response.status = 200
    response.text = AsyncMock(return_value='[{"date": "2024-01-01"}]')
    return response


@pytest.fixture
def mock_http_session(mock_response):
    """request 호출 시 mock_response 를 반환하는 HTTP 세션"""
    http_session = MagicMock()
    http_session.request = AsyncMock(return_value=mock_response)
    return http_session


@pytest.fixture(autouse=True)
def reset_shared_session():
    """공유 Session 싱글톤 초기화"""
    Session.reset_session()
    yield
    Session.reset_session()
