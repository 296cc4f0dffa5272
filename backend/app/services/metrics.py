"""
Prometheus metrics
HTTP and watchlist metrics for the dashboard API.
"""
import logging
from prometheus_client import Counter, Histogram, Info
from prometheus_client import make_asgi_app

logger = logging.getLogger(__name__)

# Application info
app_info = Info('portfolio_dashboard_info', 'Portfolio Dashboard Information')
app_info.info({
    'version': '1.0.0',
    'name': 'Portfolio Dashboard'
})

# HTTP request metrics
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Watchlist metrics
watchlist_changes_total = Counter(
    'watchlist_changes_total',
    'Total watchlist changes',
    ['action']
)

watchlist_alerts_triggered_total = Counter(
    'watchlist_alerts_triggered_total',
    'Total watchlist price alerts reported to clients',
    ['alert_type']
)


def record_http_request(method: str, endpoint: str, status: int, duration: float):
    """Record an HTTP request"""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def record_watchlist_change(action: str):
    """Record a watchlist add/update/remove"""
    watchlist_changes_total.labels(action=action).inc()


def record_watchlist_alert(alert_type: str):
    """Record a triggered price alert"""
    watchlist_alerts_triggered_total.labels(alert_type=alert_type).inc()


# ASGI application (mounted on FastAPI)
metrics_app = make_asgi_app()
