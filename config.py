import os
from dotenv import load_dotenv

load_dotenv()

# --------------------------------
# MongoDB
# --------------------------------
MONGODB_URI = os.getenv("MONGODB_URI")
DB_NAME = os.getenv("DB_NAME", "doctors_directory")
DOCTORS_COLLECTION = os.getenv("DOCTORS_COLLECTION", "doctors")

# --------------------------------
# HTTP server
# --------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 5000))

# Only the frontend is allowed to call the API from a browser
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "https://frontend-intern-9dr4.onrender.com")
CORS_METHODS = ["GET", "POST"]

# --------------------------------
# Logging
# --------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR")
