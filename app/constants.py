ALLOWED_ORIGINS = ["*"]
CORS_MAX_AGE = 86400  # 24 hours

MARKUP_POLICY = "markup"
ADDRESS_POLICY = "address"
SANITIZE_POLICIES = (MARKUP_POLICY, ADDRESS_POLICY)
DEFAULT_SANITIZE_POLICY = MARKUP_POLICY

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001
