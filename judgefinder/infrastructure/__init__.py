"""Adapters: HTTP routers, schemas, repositories and DI glue."""
