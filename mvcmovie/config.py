import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mvcmovie.db")
DB_ECHO = os.getenv("DB_ECHO", "0").lower() in ("1", "true", "yes")

# startup connection loop
DB_CONNECT_RETRIES = int(os.getenv("DB_CONNECT_RETRIES", "10"))
DB_RETRY_DELAY = float(os.getenv("DB_RETRY_DELAY", "3"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
