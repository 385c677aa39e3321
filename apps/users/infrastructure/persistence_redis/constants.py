"""Redis key constants."""

# refresh:token:{token} -> user_id
REFRESH_TOKEN_KEY_PREFIX = "refresh:token:"
# refresh:user:{user_id} -> token
REFRESH_USER_KEY_PREFIX = "refresh:user:"
