from loguru import logger as _logger

from testhttp.application.outcome import StepOutcome
from testhttp.application.ports.round_trip import RoundTripPort
from testhttp.application.step_table import StepDefinition, build_step_table, register_steps
from testhttp.domain.context import ScenarioContext
from testhttp.domain.exceptions import (
    AssertionMismatchError,
    MissingPreconditionError,
    RequestConstructionError,
    StepError,
)
from testhttp.domain.http import Headers, HttpMethod, RequestDescriptor, ResponseDescriptor

# library logging stays silent until setup_console_logging() enables it
_logger.disable("testhttp")

__version__ = "0.1.0"

__all__ = [
    "AssertionMismatchError",
    "Headers",
    "HttpMethod",
    "MissingPreconditionError",
    "RequestConstructionError",
    "RequestDescriptor",
    "ResponseDescriptor",
    "RoundTripPort",
    "ScenarioContext",
    "StepDefinition",
    "StepError",
    "StepOutcome",
    "build_step_table",
    "register_steps",
]
