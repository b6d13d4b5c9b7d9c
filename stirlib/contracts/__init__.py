"""Monthly contract aggregation and scenario comparison."""

from .comparison import ContractComparison, compare_contracts, compare_scenarios
from .monthly import aggregate_monthly

__all__ = [
    "aggregate_monthly",
    "ContractComparison",
    "compare_contracts",
    "compare_scenarios",
]
