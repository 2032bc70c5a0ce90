import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv() # load variables from .env


def _token_ttl():
    hours = os.getenv('TOKEN_TTL_HOURS')
    # no expiry unless explicitly configured
    return timedelta(hours=float(hours)) if hours else False


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = _token_ttl()
    JWT_TOKEN_LOCATION = ['headers']

    DB_FILE = os.getenv('DB_FILE', 'jobly.sqlite')

    # bcrypt work factor
    BCRYPT_LOG_ROUNDS = int(os.getenv('BCRYPT_LOG_ROUNDS', '10'))

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # turn SIGTERM into a normal exit so the shutdown checkpoint runs
    INSTALL_SIGNAL_HANDLERS = True

