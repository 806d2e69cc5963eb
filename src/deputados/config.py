from typing import Literal, get_args

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Chamber of Deputies (Câmara dos Deputados)
CAMARA_BASE_URL = "https://dadosabertos.camara.leg.br/api/v2"
# Page size asked for by the roster listing; the ranking roster uses the
# provider default instead.
ROSTER_PAGE_SIZE = 50

# Document fetch
DOCUMENT_TIMEOUT_S = 15.0
USER_AGENT = "Mozilla/5.0 (compatible; PainelDeputados/1.0)"
DOCUMENT_ACCEPT = "text/html,application/xhtml+xml,application/xml,text/xml,*/*"
DocumentKind = Literal["document", "registro", "frente"]
DOCUMENT_KINDS: tuple[str, ...] = get_args(DocumentKind)

# Output caps, part of the response contract
TEXT_LIMIT = 5000
RAW_CONTENT_LIMIT = 10000

# Expense ranking: only the first 50 deputies (alphabetical) are considered
RANKING_ROSTER_CAP = 50
RANKING_TOP_N = 10


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DEPUTADOS_", extra="ignore")

    camara_base_url: str = CAMARA_BASE_URL
    request_timeout_s: float = 60.0

    # Fan-out ceiling and per-request timeout for the ranking sub-fetches
    ranking_max_workers: int = Field(default=10, ge=1)
    ranking_fetch_timeout_s: float = 30.0

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


# Singleton instance - import this instead of creating Settings()
settings = Settings()
