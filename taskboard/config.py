

from config import settings

SECRET = settings.secret


class Config:
    access_token_lifetime = 60 * 60 * 24
    algorithm = "HS256"
    bcrypt_rounds = 10
    ip_buffer = 10
    ip_buffer_lifetime = 60 * 60 * 24
    default_page = 1
    default_page_size = 10
    max_page_size = 100
    location_history_limit = 11
    websocket_polling_interval = 1
