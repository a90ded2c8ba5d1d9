"""FastAPI dependency injection for shelfgrid services."""

from typing import Annotated

from fastapi import Depends

from shelfgrid.application.commands import AnalyzeDesignCommand


def get_analyze_command() -> AnalyzeDesignCommand:
    """Fresh AnalyzeDesignCommand for each request."""
    return AnalyzeDesignCommand()


AnalyzeCommandDep = Annotated[AnalyzeDesignCommand, Depends(get_analyze_command)]
