import os

wsgi_app = "ozone_coin.wsgi:app"

# Bind & workers
bind = f"0.0.0.0:{os.getenv('PORT', '3001')}"
# Each worker holds its own in-memory store; keep one worker unless DATABASE_URL is set
workers = int(os.getenv("GUNICORN_WORKERS", "1"))
threads = int(os.getenv("GUNICORN_THREADS", "4"))
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Respect proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
