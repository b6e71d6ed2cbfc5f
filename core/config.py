from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DB_USER: str = "hackstart"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_NAME: str = "hackstart"
    # Full URL override, e.g. sqlite:///./hackstart.db for local development
    DATABASE_URL: str | None = None

    TABLE_PREFIX: str = "hack-start_"
    CREATE_TABLES_ON_STARTUP: bool = False
    SESSION_MAX_AGE_DAYS: int = 30
    REGISTRATION_DATA_DIR: str | None = None
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    class Config:
        env_file = ".env"

settings = Settings()
