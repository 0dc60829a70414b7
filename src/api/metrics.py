from prometheus_client import Counter, Histogram, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "keyprompt_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "keyprompt_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

PROVIDER_CALLS_TOTAL = get_or_create_metric(
    "keyprompt_provider_calls_total",
    "Upstream provider calls",
    Counter,
    labelnames=["provider", "outcome"],
)

KEYWORDS_GENERATED_TOTAL = get_or_create_metric(
    "keyprompt_keywords_generated_total", "Total keywords returned", Counter
)

PROMPTS_GENERATED_TOTAL = get_or_create_metric(
    "keyprompt_prompts_generated_total", "Total prompts returned", Counter
)

FALLBACK_PROMPTS_TOTAL = get_or_create_metric(
    "keyprompt_fallback_prompts_total", "Prompts filled with a fallback sentence", Counter
)


def record_request(endpoint: str, status: str, started: float, now: float) -> None:
    """Best-effort: metrics never break a request."""
    try:
        REQUESTS_TOTAL.labels(endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint=endpoint).observe(now - started)
    except Exception:
        pass


def record_provider_call(provider: str, outcome: str) -> None:
    """Best-effort, like record_request."""
    try:
        PROVIDER_CALLS_TOTAL.labels(provider=provider, outcome=outcome).inc()
    except Exception:
        pass


def record_generated(counter, amount: int) -> None:
    try:
        counter.inc(amount)
    except Exception:
        pass
