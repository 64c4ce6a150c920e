"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from compensation_engine.calculators.catalog import DifferentialCatalog
from compensation_engine.calculators.validation import CompensationRules


def get_catalog(request: Request) -> DifferentialCatalog:
    """Get the read-only differential catalog loaded at startup."""
    return request.app.state.catalog


def get_rules(request: Request) -> CompensationRules:
    """Get the validation thresholds in effect."""
    return request.app.state.rules


# Type aliases for cleaner dependency injection
Catalog = Annotated[DifferentialCatalog, Depends(get_catalog)]
Rules = Annotated[CompensationRules, Depends(get_rules)]
