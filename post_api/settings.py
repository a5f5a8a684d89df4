from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Environment
    APP_ENV: str = "development"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 1324

    # Logging
    LOG_LEVEL: str = "INFO"

    # Content areas
    CONTENT_ROOT: str = "."
    BLOG_CONTENT_DIR: str = "src/content/blog"
    QUOTES_CONTENT_DIR: str = "src/content/bookQuotes"

    # Posts
    POST_EXTENSION: str = ".mdx"
    BLOG_PATH_PREFIX: str = "/blog"
    DEFAULT_AUTHOR: str = "Default Author"

    @property
    def posts_dir(self) -> Path:
        return Path(self.CONTENT_ROOT) / self.BLOG_CONTENT_DIR

    @property
    def quotes_dir(self) -> Path:
        return Path(self.CONTENT_ROOT) / self.QUOTES_CONTENT_DIR

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.strip().lower() == "production"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
