"""Plot Service - read-only access to the plot registry"""

from typing import List, Optional

from app.core.exceptions import PlotNotFoundError
from app.db.store import DataStore
from app.models.plot import Plot


class PlotService:

    def __init__(self, store: DataStore):
        self.store = store

    def list_plots(self, owner_email: Optional[str] = None) -> List[Plot]:
        """All plots, or only those whose current owner matches owner_email"""
        return self.store.plots.list(owner_email=owner_email)

    def get_plot(self, plot_id: str) -> Plot:
        plot = self.store.plots.get(plot_id)
        if plot is None:
            raise PlotNotFoundError(plot_id)
        return plot
