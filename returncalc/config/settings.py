from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    crm_webhook_url: str = ""
    crm_auth_bearer: str = ""
    lead_source: str = "return-rate-calculator"
    relay_timeout_seconds: float = 10.0
    reject_malformed_json: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    server_host: str = "0.0.0.0"
    server_port: int = 8000

    class Config:
        env_file = ".env"
