"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks ARITHGEN_.
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Generator (wartości domyślne dla -n / -r)
    default_count: int = 10
    default_range_max: int = 100
    max_attempts: Optional[int] = None  # None = próbkowanie bez limitu
    seed: Optional[int] = None

    # Pliki wyjściowe
    output_dir: str = "."
    exercise_file: str = "Exercises.txt"
    answer_file: str = "Answers.txt"
    grade_file: str = "Grade.txt"

    # Logging
    log_level: str = "WARNING"

    # App
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="ARITHGEN_", env_file=".env", extra="ignore")
