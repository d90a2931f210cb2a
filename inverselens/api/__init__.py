"""HTTP boundary: FastAPI application, routers and dependencies."""
