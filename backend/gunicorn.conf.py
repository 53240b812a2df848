# Bind & workers
bind = "0.0.0.0:8000"
wsgi_app = "catalog:create_app()"
workers = 2  # override with env GUNICORN_WORKERS
threads = 1
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = "info"  # override with env LOG_LEVEL

# Trust proxy headers (ProxyFix handles X-Forwarded-* in the app)
forwarded_allow_ips = "*"
proxy_protocol = False
