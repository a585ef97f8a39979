ERROR_INVALID_TOKEN = "AUTH_INVALID_TOKEN"
ERROR_TOKEN_EXPIRED = "AUTH_TOKEN_EXPIRED"
