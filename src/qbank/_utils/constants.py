# Environment variables
ENV_BASE_URL = "QBANK_URL"
ENV_QBANK_ACCESS_TOKEN = "QBANK_ACCESS_TOKEN"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_COOKIE = "Cookie"
HEADER_REFERER = "Referer"

# Credentials policies
CREDENTIALS_OMIT = "omit"
CREDENTIALS_SAME_ORIGIN = "same-origin"
CREDENTIALS_INCLUDE = "include"

# Redirect policies
REDIRECT_FOLLOW = "follow"
REDIRECT_ERROR = "error"
REDIRECT_MANUAL = "manual"

# Referrer policies
REFERRER_POLICY_NO_REFERRER = "no-referrer"

LOGGER_NAME = "qbank"
