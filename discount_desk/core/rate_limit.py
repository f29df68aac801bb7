# discount_desk/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

# 1 shared Limiter for the whole app
limiter = Limiter(key_func=get_remote_address)
