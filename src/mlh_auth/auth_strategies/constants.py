# auth_strategies/constants.py

MLH = "mlh"

# MyMLH OAuth URLs
MLH_AUTHORIZATION_URL = "https://my.mlh.io/oauth/authorize"
MLH_TOKEN_URL = "https://my.mlh.io/oauth/token"
MLH_PROFILE_URL = "https://api.mlh.com/v4/users/me"

# MyMLH only accepts space-separated scopes
MLH_SCOPE_SEPARATOR = " "

# Client credentials go in the token request body, not a Basic auth header
MLH_TOKEN_ENDPOINT_AUTH_METHOD = "client_secret_post"

DEFAULT_USER_AGENT = "mlh-auth-python"
USER_AGENT_HEADER = "User-Agent"

# Query parameter used to request expanded sub-resources on the profile
EXPAND_PARAM = "expand[]"

# Cookie carrying the CSRF state between /login and /callback
OAUTH_STATE_COOKIE = "mlh_oauth_state"
OAUTH_STATE_TTL_SECONDS = 600  # 10 minutes

# Profile keys
PROFILE_PROVIDER_KEY = "provider"
PROFILE_ID_KEY = "id"
