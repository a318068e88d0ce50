import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def database_uri(root_path):
    url = os.getenv('DATABASE_URL')
    if url:
        return url
    return f"sqlite:///{Path(root_path) / 'tasks.db'}"


def load_config(root_path):
    """Flask settings for the app rooted at ``root_path``."""
    return {
        'SQLALCHEMY_DATABASE_URI': database_uri(root_path),
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SECRET_KEY': os.getenv('SECRET_KEY', 'dev'),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
    }
