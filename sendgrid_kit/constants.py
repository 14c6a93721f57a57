from typing import Final

# API 엔드포인트
DEFAULT_BASE_URL: Final[str] = "https://api.sendgrid.com"
"""SendGrid Web API 기본 호스트"""

MAIL_SEND_PATH: Final[str] = "/v3/mail/send"
"""메일 발송 API 경로"""

GLOBAL_STATS_PATH: Final[str] = "/v3/stats"
"""전체(글로벌) 통계 조회 API 경로"""

CATEGORY_STATS_PATH: Final[str] = "/v3/categories/stats"
"""카테고리별 통계 조회 API 경로"""

SUBUSER_STATS_PATH: Final[str] = "/v3/subusers/stats"
"""서브유저별 통계 조회 API 경로"""


# 헤더
AUTHORIZATION_HEADER: Final[str] = "Authorization"
ON_BEHALF_OF_HEADER: Final[str] = "On-Behalf-Of"
"""서브유저 대리 호출(impersonation) 시 사용하는 헤더"""


# 헤더/필드 구분자 검증
FILENAME_FORBIDDEN_CHARS: Final[tuple[str, ...]] = (";", ",", "\n", "\r")
"""첨부파일 이름에 들어갈 수 없는 문자"""

CONTENT_TYPE_FORBIDDEN_CHARS: Final[tuple[str, ...]] = (";", "\n", "\r")
"""첨부파일 content type 문자열에 들어갈 수 없는 문자"""

CONTENT_ID_FORBIDDEN_CHARS: Final[tuple[str, ...]] = (",", "\n", "\r")
"""첨부파일 content id 에 들어갈 수 없는 문자"""


# 메일 발송 제한
MAX_PERSONALIZATIONS: Final[int] = 1000
MAX_CATEGORIES: Final[int] = 10


# 통계 API 제한
MAX_STATS_FILTERS: Final[int] = 10
"""카테고리/서브유저 통계 조회 시 한번에 지정할 수 있는 최대 개수"""

STATS_DATE_FORMAT: Final[str] = "%Y-%m-%d"
