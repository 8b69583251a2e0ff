from pydantic_settings import BaseSettings
from typing import List
import os


class Settings(BaseSettings):
    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./trip_booking.db")

    # Security
    secret_key: str = os.getenv("SECRET_KEY", "change-this-secret-key-in-production-please")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Paths reachable without a bearer token (Ant-style, "/**" matches a whole subtree)
    public_paths: List[str] = [
        "/api/auth/**",
        "/public/**",
        "/docs/**",
        "/redoc/**",
        "/openapi.json",
        "/health",
    ]

    # Accounts created on startup when missing
    seed_default_accounts: bool = True
    default_admin_username: str = "admin"
    default_admin_password: str = "adminpwd"
    default_admin_email: str = "admin@example.com"
    default_user_username: str = "user"
    default_user_password: str = "userpwd"
    default_user_email: str = "user@example.com"
    default_seller_username: str = "seller"
    default_seller_password: str = "sellerpwd"
    default_seller_email: str = "seller@example.com"
    default_buyer_username: str = "buyer"
    default_buyer_password: str = "buyerpwd"
    default_buyer_email: str = "buyer@example.com"

    # App
    app_name: str = "Employee Trip Booking"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
