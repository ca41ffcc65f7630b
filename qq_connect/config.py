"""
Configuration for the QQ Connect client.

Settings are loaded from a .env file in the working directory or from
environment variables. Nothing here is required at import time: a missing
value only fails when QQProvider.from_env() is called.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Application id issued by QQ Connect (sent as client_id)
QQ_APP_ID = os.getenv("QQ_APP_ID")

# Application key (sent as client_secret)
QQ_APP_KEY = os.getenv("QQ_APP_KEY")

# Callback URL registered for the application
QQ_REDIRECT_URI = os.getenv("QQ_REDIRECT_URI")

# Per-request timeout in seconds
QQ_HTTP_TIMEOUT = float(os.getenv("QQ_HTTP_TIMEOUT", "10"))
