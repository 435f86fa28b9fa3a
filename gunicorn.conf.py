import os

# Generation is CPU-bound and sub-second; threads cover the cache-hit path
worker_class = "gthread"
workers = int(os.getenv("WEB_CONCURRENCY", "2"))
threads = 4
bind = f"0.0.0.0:{os.getenv('PORT', '3001')}"
timeout = 30
graceful_timeout = 10
keepalive = 5
# only trust X-Forwarded-* from the proxy in front of us
forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")

# hygiene
max_requests = 5000
max_requests_jitter = 500

# GET-only JSON API with short query strings
limit_request_line = 1024
limit_request_fields = 50
limit_request_field_size = 4096
