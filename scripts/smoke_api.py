# быстрый смоук живого бэкенда: stats + top, без создания ссылок
# URLBOARD_API_BASE_URL=http://localhost:8000 python scripts/smoke_api.py
from urlboard import config
from urlboard.api_client import ApiClient
from urlboard.logging_utils import setup_logging

logger = setup_logging(debug=True, file_path=None)
api = ApiClient(config.api_base_url(), timeout=config.request_timeout() or 10.0, logger=logger)

print("stats:", api.stats())
print("top:", api.top())
print("search:", api.search("https://", 3))
