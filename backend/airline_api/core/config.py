from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional
from pathlib import Path

class Settings(BaseSettings):
    app_name: str = Field(default="Airline Operations API", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    secret_key: str = Field(default="dev-only-secret", alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", alias="ALGORITHM")
    # Session tokens live for 12h
    access_token_expire_minutes: int = Field(default=720, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")
    db_pool_timeout: int = Field(default=30, alias="DB_POOL_TIMEOUT", description="Seconds to wait for a pooled connection")
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma separated list of allowed CORS origins, or *")
    default_ticket_price: float = Field(default=199.0, alias="DEFAULT_TICKET_PRICE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    auto_apply_migrations: bool = Field(default=True, alias="AUTO_APPLY_MIGRATIONS")
    # Demo credential registry. DEMO_USERS_JSON replaces the built-in users entirely.
    demo_users_json: Optional[str] = Field(default=None, alias="DEMO_USERS_JSON")
    demo_passenger_ssn: str = Field(default="", alias="DEMO_PASSENGER_SSN")
    demo_passenger_email: str = Field(default="passenger@example.com", alias="DEMO_PASSENGER_EMAIL")
    demo_agent_id: str = Field(default="", alias="DEMO_AGENT_ID")
    demo_crew_id: str = Field(default="E1001", alias="DEMO_CREW_ID")
    demo_admin_id: str = Field(default="", alias="DEMO_ADMIN_ID")

    class Config:
        # Load env from backend/.env regardless of CWD
        env_file = str(Path(__file__).resolve().parents[2] / ".env")
        case_sensitive = False

    def _parse_list(self, v: Optional[str]) -> List[str]:
        if v is None:
            return []
        s = v.strip()
        if not s:
            return []
        return [e.strip() for e in s.split(",") if e.strip()]

    @property
    def cors_origins(self) -> List[str]:
        items = self._parse_list(self.cors_origins_raw)
        if not items:
            return ["*"]
        return items

settings = Settings()  # type: ignore
