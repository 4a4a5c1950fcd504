from customizer.src.routes.health import router as health_router
from customizer.src.routes.pipeline import router as pipeline_router
from customizer.src.routes.parameters import router as parameters_router

__all__ = ["health_router", "pipeline_router", "parameters_router"]
