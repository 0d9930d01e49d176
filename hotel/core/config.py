import os
from dotenv import load_dotenv

load_dotenv()

# -------- STORAGE --------
STORAGE_BACKEND = os.getenv("HOTEL_STORAGE_BACKEND", "sql")  # sql | redis | memory
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./hotel.db")
REDIS_URL = os.getenv("REDIS_URL")
REDIS_KEY_PREFIX = os.getenv("REDIS_KEY_PREFIX", "hotel:")

# -------- JWT --------
JWT_SECRET = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))

# -------- ADMIN (single fixed identity) --------
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@hotelinfinity.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin User")

# -------- PAYMENT SIMULATION --------
PAYMENT_DELAY_SECONDS = float(os.getenv("PAYMENT_DELAY_SECONDS", 1.5))
PAYMENT_TIMEOUT_SECONDS = float(os.getenv("PAYMENT_TIMEOUT_SECONDS", 10))

# -------- LOGGING --------
LOG_DIR = os.getenv("LOG_DIR", "logs")
