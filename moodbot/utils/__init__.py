from .analytics import AnalyticsSnapshot, compute_analytics  # noqa: F401
from .catalog import DEFAULT_CATALOG, MOOD_OPTIONS, MoodCatalog, MoodOption  # noqa: F401
from .log import get_logger, log  # noqa: F401
from .responder import ContextualResponder  # noqa: F401
from .sample_data import generate_sample_data  # noqa: F401
