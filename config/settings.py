from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.services.validation import ValidationPolicy


class Settings(BaseSettings):
	# Exchange store
	EXCHANGE_STORE: Literal['json', 'sql'] = 'json'
	EXCHANGE_FILE_PATH: str = 'data/currency_exchanges.json'
	DATABASE_URL: str = 'sqlite+aiosqlite:///./currency_converter.db'

	# Cache
	CACHE_BACKEND: Literal['memory', 'redis'] = 'memory'
	REDIS_URL: str = 'redis://localhost:6379'
	EXCHANGES_CACHE_TTL_SECONDS: int = Field(default=60, gt=0)
	CURRENCIES_CACHE_TTL_SECONDS: int = Field(default=30, gt=0)

	# Domain
	CONNECTION_POLICY: ValidationPolicy = ValidationPolicy.WITH_INVERSES

	# Application
	APP_NAME: str = 'Currency Path Resolver API'
	DEBUG: bool = True
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@property
	def exchanges_cache_ttl(self) -> timedelta:
		return timedelta(seconds=self.EXCHANGES_CACHE_TTL_SECONDS)

	@property
	def currencies_cache_ttl(self) -> timedelta:
		return timedelta(seconds=self.CURRENCIES_CACHE_TTL_SECONDS)


@lru_cache
def get_settings() -> Settings:
	return Settings()
