#Pydantic class designed specifically for configuration management.
#automatically reads values from Environment variables
from pydantic_settings import BaseSettings
from typing import List

#all configuration values needed
class Settings(BaseSettings):
    app_name: str = "Medicare Clinic API"
    database_url: str = "sqlite:///./medicare.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    log_json: bool = False
    cors_origins: List[str] = ["http://localhost:3000"]
    ping_message: str = "ping"

   #Tells Pydantic to load variables from a .env file
    class Config:
        env_file = ".env"

settings = Settings()


#Values come from the environment (DATABASE_URL, LOG_LEVEL, ...) or .env, falling back to a local SQLite file for development.
