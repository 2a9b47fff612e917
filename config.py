import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    HOUSING_API_BACKEND = data.get("HOUSING_API_BACKEND", "memory")
    HOUSING_API_URL = data.get("HOUSING_API_URL", "http://localhost:3000/api")
    HOUSING_API_TIMEOUT = float(data.get("HOUSING_API_TIMEOUT", 5.0))
    COUNTDOWN_INTERVAL_SECONDS = float(data.get("COUNTDOWN_INTERVAL_SECONDS", 1.0))
    HEATMAP_ROOMS = data.get(
        "HEATMAP_ROOMS", ["101", "102", "103", "104", "201", "202", "203", "204"]
    )
