from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    PERPLEXITY_API_KEY: str = ""
    GEMINI_API_KEY: str = ""

    PERPLEXITY_MODEL: str = "llama-3.1-sonar-small-128k-online"
    PERPLEXITY_API_URL: str = "https://api.perplexity.ai/chat/completions"

    GEMINI_MODEL: str = "gemini-1.5-flash-latest"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"

    LOG_LEVEL: str = "INFO"

    @property
    def GEMINI_ENDPOINT(self) -> str:
        return f"{self.GEMINI_BASE_URL}/v1beta/models/{self.GEMINI_MODEL}:generateContent"

settings = Settings()
