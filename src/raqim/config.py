from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # LLM configuration (DeepSeek, OpenAI-compatible API)
    llm_api_key: str = ""  # empty = canned demo replies, no network calls
    llm_base_url: str = "https://api.deepseek.com"
    llm_model_name: str = "deepseek-chat"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000
    llm_timeout: float = 60.0
    llm_max_retries: int = 2  # retries after the first attempt, exponential backoff
    llm_retry_delay: float = 1.0  # first retry delay (seconds), doubled each time

    # Chat
    chat_history_limit: int = 10  # previous turns sent with each prompt

    # Storage
    seed_sample_data: bool = True

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    @property
    def llm_enabled(self) -> bool:
        return bool(self.llm_api_key)


settings = Settings()
