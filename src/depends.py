from config import ApplicationConfig
from src.adapter.services.http_housing_api import HttpHousingApi
from src.adapter.services.in_memory_housing_api import InMemoryHousingApi
from src.adapter.services.system_clock import SystemClock
from src.app.services.clock import IClock
from src.app.services.countdown_board import CountdownBoard
from src.app.services.density_aggregator import DensityAggregator
from src.app.services.housing_api import IHousingApi
from src.app.services.invitation_engine import InvitationEngine
from src.app.services.timer_registry import TimerRegistry

clock = SystemClock()

if ApplicationConfig.HOUSING_API_BACKEND == "http":
    housing_api = HttpHousingApi(
        ApplicationConfig.HOUSING_API_URL, timeout=ApplicationConfig.HOUSING_API_TIMEOUT
    )
else:
    housing_api = InMemoryHousingApi.from_seed_file(clock)

# Process-wide dashboard state, one event loop owns all of it
invitation_engine = InvitationEngine()
countdown_board = CountdownBoard()
timer_registry = TimerRegistry(
    clock, interval_seconds=ApplicationConfig.COUNTDOWN_INTERVAL_SECONDS
)
density_aggregator = DensityAggregator()


def get_clock() -> IClock:
    return clock


def get_housing_api() -> IHousingApi:
    return housing_api


def get_invitation_engine() -> InvitationEngine:
    return invitation_engine


def get_countdown_board() -> CountdownBoard:
    return countdown_board


def get_timer_registry() -> TimerRegistry:
    return timer_registry


def get_density_aggregator() -> DensityAggregator:
    return density_aggregator
