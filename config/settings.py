from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Solana JSON-RPC endpoint (public mainnet by default, rate-limited)
    solana_rpc_url: str = "https://api.mainnet-beta.solana.com"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False


settings = Settings()
