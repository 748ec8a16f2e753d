import os


class Config:
    BIND_HOST = os.environ.get("TIME_SERVER_HOST", "0.0.0.0")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # keep responses on one line even when debug is on
    JSON_COMPACT = True
