"""Rich renderings of run results for the command line."""

from .summary import SummaryPresenter

__all__ = ["SummaryPresenter"]
