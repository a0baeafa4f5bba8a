from pathviz.presentation.api.routers.charts import router as charts_router

__all__ = ["charts_router"]
