from .api_client import ApiClient
from .clipboard import ClipboardFeedback
from .controller import ViewController
from .logging_utils import setup_logging
from .models import CollisionStrategy, ShortenResult, StatsSnapshot, Tab, TopEntry
from .result import Err, Ok
from .state import RenderModel, ViewState
from .stats_cache import StatsCache
from .submission import SubmissionWorkflow
from .timers import AsyncioScheduler, Lifetime, Timer

__all__ = [
    "ApiClient",
    "AsyncioScheduler",
    "ClipboardFeedback",
    "CollisionStrategy",
    "Err",
    "Lifetime",
    "Ok",
    "RenderModel",
    "ShortenResult",
    "StatsCache",
    "StatsSnapshot",
    "SubmissionWorkflow",
    "Tab",
    "Timer",
    "TopEntry",
    "ViewController",
    "ViewState",
    "setup_logging",
]
__version__ = "0.1.0"
