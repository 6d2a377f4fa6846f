"""
Param model for /hr/dashboard/charts.

Query string is validated once at the boundary; after this point the
chart type is always a ChartType member.
"""

from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from services.hr_charts.errors import InvalidParameter


class ChartType(str, Enum):
    MONTHLY = 'monthly'
    BY_JOB = 'by-job'


SUPPORTED_TYPES = ', '.join(t.value for t in ChartType)


class ChartsParams(BaseModel):
    """Params for /hr/dashboard/charts."""
    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        populate_by_name=True,
        extra='ignore',
    )

    chart_type: ChartType = Field(
        validation_alias='type',
        description="Chart shape: monthly or by-job",
    )


def parse_chart_params(args: Mapping[str, str]) -> ChartsParams:
    """
    Validate query args into ChartsParams.

    Raises:
        InvalidParameter: type is missing, empty, or not a supported value
    """
    raw: Optional[str] = args.get('type')
    if raw is None or raw.strip() == '':
        raise InvalidParameter(
            f"Missing required parameter: type. Supported types: {SUPPORTED_TYPES}"
        )
    try:
        return ChartsParams.model_validate({'type': raw})
    except ValidationError:
        raise InvalidParameter(
            f"Invalid chart type: {raw}. Supported types: {SUPPORTED_TYPES}"
        )
