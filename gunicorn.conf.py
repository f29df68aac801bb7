# gunicorn.conf.py  (gunicorn -c gunicorn.conf.py discount_desk.main:app)
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
workers = int(os.getenv("WEB_CONCURRENCY", "2"))
worker_class = "uvicorn.workers.UvicornWorker"
preload_app = False
timeout = 30
graceful_timeout = 15
keepalive = 5
accesslog = "-"
errorlog = "-"
loglevel = "info"
