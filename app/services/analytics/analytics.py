from fastapi import HTTPException, status

from app.database.store import EntityStore
from app.models.analytics.analytics import CapacityTrend, ChartData, ProjectStats
from app.services.analytics.aggregation import compute_stats, energy_distribution
from app.services.errors import CapacityParseError
from app.utils.logger_utils import logger
from config import CHART_CONFIG, STATS_CONFIG

ENERGY_TYPE_COLORS = {
    "solar": "#FF9800",
    "wind": "#1976D2",
    "hydro": "#2196F3",
    "biomass": "#4CAF50",
    "geothermal": "#9C27B0",
    "other": "#666666",
}
DEFAULT_COLOR = "#666666"


async def get_stats_helper(store: EntityStore) -> ProjectStats:
    projects = await store.list()
    try:
        return compute_stats(projects, STATS_CONFIG["PERCENTAGE_CHANGES"])
    except CapacityParseError as e:
        logger.error(f"Stats aborted, corrupt project record: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


async def get_chart_data_helper(store: EntityStore) -> ChartData:
    projects = await store.list()
    distribution = energy_distribution(projects)
    for share in distribution:
        share.color = ENERGY_TYPE_COLORS.get(share.type.lower(), DEFAULT_COLOR)
    return ChartData(
        capacity_trends=[CapacityTrend(**point) for point in CHART_CONFIG["CAPACITY_TRENDS"]],
        energy_distribution=distribution,
    )
