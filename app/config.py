from dotenv import load_dotenv

import os

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# any broadcaster backend: memory://, redis://host:6379, postgres://...
BROADCAST_URL = os.getenv("BROADCAST_URL", "memory://")
LOBBY_CHANNEL = os.getenv("LOBBY_CHANNEL", "lobby")

CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

BOARD_SIZE = 10
