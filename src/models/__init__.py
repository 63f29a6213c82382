"""
Data Models and Analytical Components

Pydantic models for contacts and derived graph structures, plus the graph
builder, path finder, statistics, insights and introduction-path components.
"""

from src.models.entities import (
    Tier,
    ConnectionStrength,
    Connection,
    Contact,
    NetworkNode,
    NetworkEdge,
    NetworkGraph,
    NetworkPath,
    NetworkInsights,
    NetworkStatistics,
    SuggestedConnection,
    IntroductionPath,
)
from src.models.graph import (
    InvalidContactError,
    NetworkGraphBuilder,
    build_network_graph,
    coerce_contacts,
)
from src.models.paths import (
    PathFinder,
    calculate_path_strength,
    find_all_paths,
    find_shortest_path,
    get_strength_value,
)
from src.models.statistics import get_network_statistics, network_density
from src.models.insights import (
    InsightsGenerator,
    SuggestionRule,
    DEFAULT_SUGGESTION_RULES,
    generate_network_insights,
)
from src.models.introductions import generate_introduction_paths

__all__ = [
    "Tier",
    "ConnectionStrength",
    "Connection",
    "Contact",
    "NetworkNode",
    "NetworkEdge",
    "NetworkGraph",
    "NetworkPath",
    "NetworkInsights",
    "NetworkStatistics",
    "SuggestedConnection",
    "IntroductionPath",
    "InvalidContactError",
    "NetworkGraphBuilder",
    "build_network_graph",
    "coerce_contacts",
    "PathFinder",
    "calculate_path_strength",
    "find_all_paths",
    "find_shortest_path",
    "get_strength_value",
    "get_network_statistics",
    "network_density",
    "InsightsGenerator",
    "SuggestionRule",
    "DEFAULT_SUGGESTION_RULES",
    "generate_network_insights",
    "generate_introduction_paths",
]
