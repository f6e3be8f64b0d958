from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DB_URL: str = "sqlite+aiosqlite:///./spa_office.db"
    DB_ECHO: bool = False
    DB_CREATE_ALL: bool = False

    LOCALE: str = "id_ID"
    SHOP_NAME: str = "Vilia Baby Spa"
    SHOP_WHATSAPP: str = "082210400961"

    LOG_LEVEL: str = "INFO"
    REPORT_HISTORY_LIMIT: int = 50

    class Config:
        env_file = ".env"

settings = Settings()
