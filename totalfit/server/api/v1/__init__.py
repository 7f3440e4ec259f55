"""TotalFit HTTP API routers."""
