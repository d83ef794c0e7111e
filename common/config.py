"""Configurações da aplicação carregadas de variáveis de ambiente.
- Este módulo define a classe `Settings`, utilizada pela API e pelo ponto de
entrada do processo para acessar porta, endereço de bind, nível de log e a
versão anunciada em `GET /`.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Configurações tipadas da aplicação.
    - Os valores são lidos de variáveis de ambiente (pelos aliases definidos) e
    opcionalmente de um arquivo `.env` na raiz do projeto.
    """
    port: int = Field(default=3000, alias="PORT")
    host: str = Field(default="0.0.0.0", alias="HOST")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


settings = Settings()
