import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///mathquiz.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DEBUG = os.environ.get('FLASK_DEBUG', '0').lower() in ('1', 'true', 'yes')
    # All game routes are mounted under this prefix; /health stays unprefixed
    API_PREFIX = os.environ.get('API_PREFIX', '/api/v1')
    # A session stops handing out questions after this many answers
    MAX_ANSWERS_PER_GAME = int(os.environ.get('MAX_ANSWERS_PER_GAME', '10'))
    # Comma separated list of frontend origins allowed by CORS
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173'
    ).split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
