from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Calculadora Obra Gris"
    APP_URL: str = "https://tu-app-calculadora.vercel.app"
    CURRENCY: str = "ARS"
    DEFAULT_LOCATION: str = "Argentina"

    # Gemini: price lookup, supplier search, chat
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TIMEOUT: int = 30
    GEMINI_TEMPERATURE: float = 0.2

    class Config:
        env_file = ".env"


settings = Settings()
